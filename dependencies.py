# dependencies.py
"""
FastAPI dependencies shared by the routers.

- protect: bearer-token gate, attaches the token identity to request.state
- authorize: role allow-list check layered on top of protect
- service factories bound to the request's database session and mailer
"""
from typing import Callable

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from database import get_session
from services.account_repository import ADMIN_ACCOUNT, USER_ACCOUNT
from services.ad_service import AdService
from services.auth_service import AuthService
from services.category_service import CategoryService
from services.exceptions import Forbidden, Unauthorized
from services.token_service import TokenData, validate_token
from utils.email import get_default_mailer


def get_mailer():
     return get_default_mailer()


# Token Auth Dependency
def protect(request: Request) -> TokenData:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise Unauthorized("Not authorized, no token")
     token = auth.split(" ", 1)[1].strip()
     identity = validate_token(token)
     request.state.account = identity
     return identity


def authorize(*roles: str) -> Callable[..., TokenData]:
     """Dependency factory: the authenticated role must be one of `roles`."""

     def check_role(identity: TokenData = Depends(protect)) -> TokenData:
          if identity.role not in roles:
               raise Forbidden(f"Role '{identity.role}' is not authorized to access this route")
          return identity

     return check_role


def require_user_account(identity: TokenData = Depends(protect)) -> TokenData:
     """User-owned resources need a token issued for a users-table account."""
     if identity.kind != USER_ACCOUNT.name:
          raise Forbidden("This route requires a user account")
     return identity


def get_user_auth_service(
     db: Session = Depends(get_session),
     mailer=Depends(get_mailer),
) -> AuthService:
     return AuthService(db, mailer, USER_ACCOUNT)


def get_admin_auth_service(
     db: Session = Depends(get_session),
     mailer=Depends(get_mailer),
) -> AuthService:
     return AuthService(db, mailer, ADMIN_ACCOUNT)


def get_ad_service(db: Session = Depends(get_session)) -> AdService:
     return AdService(db)


def get_category_service(db: Session = Depends(get_session)) -> CategoryService:
     return CategoryService(db)
