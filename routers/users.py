"""
User self-service routes mounted at /users.

Every ad route here is scoped to the authenticated user; someone else's ad
answers 404 exactly like a missing one.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from dependencies import get_ad_service, get_user_auth_service, require_user_account
from routers.auth import login_user, register_user
from schemas import (
     AdCreate,
     AdPublicResponse,
     AdResponse,
     AdUpdate,
     ApiResponse,
     AuthData,
     UserProfileUpdate,
     UserResponse,
)
from services.ad_service import AdService
from services.auth_service import AuthService
from services.token_service import TokenData

router = APIRouter(prefix="/users", tags=["users"])

router.add_api_route(
     "/register",
     register_user,
     methods=["POST"],
     response_model=ApiResponse[UserResponse],
     status_code=status.HTTP_201_CREATED,
     summary="Register a user"
)
router.add_api_route(
     "/login",
     login_user,
     methods=["POST"],
     response_model=ApiResponse[AuthData],
     summary="Log in a user"
)


@router.post(
     "/postAd",
     response_model=ApiResponse[AdResponse],
     status_code=status.HTTP_201_CREATED,
     summary="Post a new ad"
)
def post_ad(
     body: AdCreate,
     identity: TokenData = Depends(require_user_account),
     ads: AdService = Depends(get_ad_service)
):
     """
     Create an ad owned by the caller.

     - **platform**: category ID
     - **price**: must not be negative
     - **duration**: `{value >= 1, unit: hour|day|week|month|year}`
     """
     ad = ads.post(
          owner_id=identity.id,
          title=body.title,
          description=body.description,
          platform=body.platform,
          price=body.price,
          duration=body.duration.model_dump(),
          contact_email=body.contact_email,
     )
     return ApiResponse(message="Ad posted successfully", data=AdResponse.model_validate(ad))


@router.get("/me", response_model=ApiResponse[UserResponse], summary="Get own profile")
def get_profile(
     identity: TokenData = Depends(require_user_account),
     service: AuthService = Depends(get_user_auth_service)
):
     user = service.get_account(identity.id)
     return ApiResponse(data=UserResponse.model_validate(user))


@router.put("/me", response_model=ApiResponse[UserResponse], summary="Update own profile")
def update_profile(
     body: UserProfileUpdate,
     identity: TokenData = Depends(require_user_account),
     service: AuthService = Depends(get_user_auth_service)
):
     """
     Update profile fields. Changing the password requires
     **currentPassword** and **newPassword**.
     """
     user = service.update_profile(identity.id, body.to_changes())
     return ApiResponse(message="Profile updated successfully", data=UserResponse.model_validate(user))


@router.get(
     "/ads/mine",
     response_model=ApiResponse[List[AdPublicResponse]],
     summary="List own ads (active and inactive)"
)
def my_ads(
     identity: TokenData = Depends(require_user_account),
     ads: AdService = Depends(get_ad_service)
):
     items = ads.mine(identity.id)
     return ApiResponse(data=[AdPublicResponse.model_validate(ad) for ad in items])


@router.get("/ads/{ad_id}", response_model=ApiResponse[AdPublicResponse], summary="Get own ad")
def my_ad(
     ad_id: int,
     identity: TokenData = Depends(require_user_account),
     ads: AdService = Depends(get_ad_service)
):
     ad = ads.mine_by_id(identity.id, ad_id)
     return ApiResponse(data=AdPublicResponse.model_validate(ad))


@router.put("/ads/{ad_id}", response_model=ApiResponse[AdResponse], summary="Update own ad")
def update_ad(
     ad_id: int,
     body: AdUpdate,
     identity: TokenData = Depends(require_user_account),
     ads: AdService = Depends(get_ad_service)
):
     ad = ads.update(identity.id, ad_id, body.model_dump(exclude_unset=True))
     return ApiResponse(message="Ad updated successfully", data=AdResponse.model_validate(ad))


@router.delete("/ads/{ad_id}", response_model=ApiResponse[AdResponse], summary="Deactivate own ad")
def deactivate_ad(
     ad_id: int,
     identity: TokenData = Depends(require_user_account),
     ads: AdService = Depends(get_ad_service)
):
     ad = ads.deactivate(identity.id, ad_id)
     return ApiResponse(message="Ad deactivated successfully", data=AdResponse.model_validate(ad))
