from .exceptions import ServiceError
from .account_repository import (
     AccountKind,
     AccountRepository,
     USER_ACCOUNT,
     ADMIN_ACCOUNT,
)
from .otp_service import OtpService, generate_otp
from .token_service import TokenData, mint_token, validate_token
from .auth_service import AuthService, hash_password, verify_password
from .ad_service import AdService
from .category_service import CategoryService, seed_categories

__all__ = [
     "ServiceError",
     "AccountKind",
     "AccountRepository",
     "USER_ACCOUNT",
     "ADMIN_ACCOUNT",
     "OtpService",
     "generate_otp",
     "TokenData",
     "mint_token",
     "validate_token",
     "AuthService",
     "hash_password",
     "verify_password",
     "AdService",
     "CategoryService",
     "seed_categories",
]
