"""
Admin routes mounted at /admin.

Registration, OTP and login mirror the user flow through the same
AuthService; listing users requires an admin-role token.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from dependencies import authorize, get_admin_auth_service
from models import Role
from routers.auth import auth_data
from schemas import (
     AdminRegisterRequest,
     AdminResponse,
     ApiResponse,
     AuthData,
     LoginRequest,
     ResendOtpRequest,
     UserResponse,
     VerifyOtpRequest,
)
from schemas.common import pagination_from
from services.auth_service import AuthService
from services.token_service import TokenData

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
     "/register",
     response_model=ApiResponse[AdminResponse],
     status_code=status.HTTP_201_CREATED,
     summary="Register an admin"
)
def register_admin(
     body: AdminRegisterRequest,
     service: AuthService = Depends(get_admin_auth_service)
):
     admin = service.register(
          email=body.email,
          password=body.password,
          full_name=body.full_name,
     )
     return ApiResponse(
          message="Admin registered successfully. OTP sent to email.",
          data=AdminResponse.model_validate(admin),
     )


@router.post("/login", response_model=ApiResponse[AuthData], summary="Log in an admin")
def login_admin(
     body: LoginRequest,
     service: AuthService = Depends(get_admin_auth_service)
):
     admin, token = service.login(body.email, body.password)
     return ApiResponse(message="Login successful", data=auth_data(admin, token))


@router.post("/verifyOtp", response_model=ApiResponse[AuthData], summary="Verify an admin OTP")
def verify_admin_otp(
     body: VerifyOtpRequest,
     service: AuthService = Depends(get_admin_auth_service)
):
     admin, token = service.verify_otp(body.email, body.otp)
     return ApiResponse(message="OTP verified successfully", data=auth_data(admin, token))


@router.post("/resendOtp", response_model=ApiResponse[None], summary="Resend an admin OTP")
def resend_admin_otp(
     body: ResendOtpRequest,
     service: AuthService = Depends(get_admin_auth_service)
):
     service.resend_otp(body.email)
     return ApiResponse(message="OTP resent successfully")


@router.get(
     "/users/all",
     response_model=ApiResponse[List[UserResponse]],
     summary="List users (paginated)"
)
def list_users(
     page: Optional[int] = Query(None, description="Page number (10 users per page)"),
     identity: TokenData = Depends(authorize(Role.ADMIN.value)),
     service: AuthService = Depends(get_admin_auth_service)
):
     result = service.list_users(page)
     return ApiResponse(
          data=[UserResponse.model_validate(user) for user in result.items],
          pagination=pagination_from(result),
     )
