"""
Account authentication routes.

Mounted at /api/auth; the user register/login handlers are also exposed
under /users, and the admin router reuses the response helpers.
"""
from fastapi import APIRouter, Depends, status

from models import Admin
from dependencies import get_admin_auth_service, get_user_auth_service, protect
from schemas import (
     ApiResponse,
     AuthData,
     LoginRequest,
     ResendOtpRequest,
     UserRegisterRequest,
     UserResponse,
     AdminResponse,
     VerifyOtpRequest,
)
from services.account_repository import ADMIN_ACCOUNT
from services.auth_service import AuthService
from services.token_service import TokenData

router = APIRouter(prefix="/api/auth", tags=["auth"])


def to_account_response(account) -> UserResponse | AdminResponse:
     if isinstance(account, Admin):
          return AdminResponse.model_validate(account)
     return UserResponse.model_validate(account)


def auth_data(account, token: str) -> AuthData:
     return AuthData(token=token, account=to_account_response(account))


@router.post(
     "/register",
     response_model=ApiResponse[UserResponse],
     status_code=status.HTTP_201_CREATED,
     summary="Register a user"
)
def register_user(
     body: UserRegisterRequest,
     service: AuthService = Depends(get_user_auth_service)
):
     """
     Create an unverified user and email a one-time passcode.
     No token is issued until the OTP is verified.
     """
     user = service.register(
          email=body.email,
          password=body.password,
          confirm_password=body.confirm_password,
          first_name=body.first_name,
          last_name=body.last_name,
          phone=body.mobile,
          address=body.address,
          city=body.city,
          state=body.state,
          zip_code=body.zip,
     )
     return ApiResponse(
          message="User registered successfully. OTP sent to email.",
          data=to_account_response(user),
     )


@router.post("/login", response_model=ApiResponse[AuthData], summary="Log in a user")
def login_user(
     body: LoginRequest,
     service: AuthService = Depends(get_user_auth_service)
):
     user, token = service.login(body.email, body.password)
     return ApiResponse(message="Login successful", data=auth_data(user, token))


@router.post("/verifyOtp", response_model=ApiResponse[AuthData], summary="Verify a user OTP")
def verify_user_otp(
     body: VerifyOtpRequest,
     service: AuthService = Depends(get_user_auth_service)
):
     user, token = service.verify_otp(body.email, body.otp)
     return ApiResponse(message="OTP verified successfully", data=auth_data(user, token))


@router.post("/resendOtp", response_model=ApiResponse[None], summary="Resend a user OTP")
def resend_user_otp(
     body: ResendOtpRequest,
     service: AuthService = Depends(get_user_auth_service)
):
     service.resend_otp(body.email)
     return ApiResponse(message="OTP resent successfully")


@router.get(
     "/me",
     response_model=ApiResponse[UserResponse | AdminResponse],
     summary="Get the current account"
)
def get_me(
     identity: TokenData = Depends(protect),
     users: AuthService = Depends(get_user_auth_service),
     admins: AuthService = Depends(get_admin_auth_service)
):
     service = admins if identity.kind == ADMIN_ACCOUNT.name else users
     account = service.get_account(identity.id)
     return ApiResponse(data=to_account_response(account))


@router.post("/logout", response_model=ApiResponse[None], summary="Log out")
def logout(identity: TokenData = Depends(protect)):
     """Tokens are stateless; the client discards its copy."""
     return ApiResponse(message="Logout successful. Please delete the token from client side.")
