from .common import ApiResponse, ErrorResponse, IdRequest, Pagination
from .account import (
     UserRegisterRequest,
     AdminRegisterRequest,
     LoginRequest,
     VerifyOtpRequest,
     ResendOtpRequest,
     UserProfileUpdate,
     UserResponse,
     AdminResponse,
     AuthData,
)
from .category import CategoryCreate, CategoryResponse
from .ad import (
     AdCreate,
     AdUpdate,
     AdResponse,
     AdPublicResponse,
     AdDetailsResponse,
)

__all__ = [
     "ApiResponse",
     "ErrorResponse",
     "IdRequest",
     "Pagination",
     "UserRegisterRequest",
     "AdminRegisterRequest",
     "LoginRequest",
     "VerifyOtpRequest",
     "ResendOtpRequest",
     "UserProfileUpdate",
     "UserResponse",
     "AdminResponse",
     "AuthData",
     "CategoryCreate",
     "CategoryResponse",
     "AdCreate",
     "AdUpdate",
     "AdResponse",
     "AdPublicResponse",
     "AdDetailsResponse",
]
