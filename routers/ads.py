"""
Single-ad lookup routes mounted at /ads.
"""
from fastapi import APIRouter, Depends

from dependencies import get_ad_service, protect
from schemas import AdDetailsResponse, AdPublicResponse, ApiResponse, IdRequest
from services.ad_service import AdService
from services.token_service import TokenData

router = APIRouter(prefix="/ads", tags=["ads"])


@router.post("/getAdbyId", response_model=ApiResponse[AdPublicResponse], summary="Get an ad by ID")
def get_ad_by_id(body: IdRequest, ads: AdService = Depends(get_ad_service)):
     """Public. Inactive ads are returned too."""
     ad = ads.get_by_id(body.id)
     return ApiResponse(data=AdPublicResponse.model_validate(ad))


@router.post(
     "/getDetailsById",
     response_model=ApiResponse[AdDetailsResponse],
     summary="Get an ad with poster contact details"
)
def get_ad_details_by_id(
     body: IdRequest,
     identity: TokenData = Depends(protect),
     ads: AdService = Depends(get_ad_service)
):
     ad = ads.get_details_by_id(body.id)
     return ApiResponse(data=AdDetailsResponse.model_validate(ad))
