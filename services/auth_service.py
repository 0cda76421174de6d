"""
Auth Service - registration, OTP verification, login and profile self-service.

One implementation serves both account kinds (users and admins); the
differences live in AccountKind.

Account states: PendingVerification -> Verified. Users also carry an
orthogonal active/deactivated flag that blocks login.
"""
import logging
from typing import Optional, Tuple

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from models import User
from services.account_repository import (
     Account,
     AccountKind,
     AccountRepository,
     normalize_email,
)
from services.exceptions import (
     AccountDeactivated,
     DuplicateIdentity,
     InvalidCredentials,
     InvalidInput,
     NotFound,
     NotVerified,
)
from services.otp_service import OtpService
from services.pagination import Page, paginate
from services.token_service import mint_token

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
     return pwd_context.hash(password)


def verify_password(plain: str, hashed: Optional[str]) -> bool:
     if not hashed:
          return False
     return pwd_context.verify(plain, hashed)


def _check_password_length(password: str) -> None:
     if len(password) < MIN_PASSWORD_LENGTH:
          raise InvalidInput(f"Password should be at least {MIN_PASSWORD_LENGTH} characters")


class AuthService:
     """Service class for account authentication flows."""

     def __init__(self, db: Session, mailer, kind: AccountKind):
          self.db = db
          self.kind = kind
          self.accounts = AccountRepository(db, kind)
          self.otp = OtpService(self.accounts, mailer)

     def issue_token(self, account: Account) -> str:
          return mint_token(account.id, account.role, self.kind.name)

     def register(
          self,
          email: str,
          password: str,
          confirm_password: Optional[str] = None,
          **profile
     ) -> Account:
          """
          Create an unverified account and email it an OTP.

          The email goes out before the record is created; if sending fails
          nothing is persisted.

          Raises:
               InvalidInput: passwords differ or are too short
               DuplicateIdentity: email already registered
               UpstreamUnavailable: the OTP email could not be sent
          """
          if self.kind.requires_password_confirmation and password != confirm_password:
               raise InvalidInput("Passwords do not match")
          _check_password_length(password)

          email = normalize_email(email)
          if self.accounts.email_taken(email):
               raise DuplicateIdentity(f"{self.kind.label} already exists with this email")

          hashed = hash_password(password)
          otp, expires_at = self.otp.new_code()
          self.otp.send(email, otp)

          account = self.accounts.create(
               email=email,
               password=hashed,
               otp=otp,
               otp_expires_at=expires_at,
               is_verified=False,
               **profile
          )
          logger.info("%s registered: id=%s email=%s", self.kind.label, account.id, account.email)
          return account

     def verify_otp(self, email: str, otp: str) -> Tuple[Account, str]:
          """Verification doubles as login: returns the account and a fresh token."""
          account = self.otp.verify(email, otp)
          logger.info("%s verified: id=%s", self.kind.label, account.id)
          return account, self.issue_token(account)

     def resend_otp(self, email: str) -> Account:
          # Resending always drops the account back to unverified, even when it
          # was already verified.
          account = self.accounts.find_by_email(email, with_secrets=True)
          if account is None:
               raise NotFound("Please enter correct email")
          account = self.otp.reissue(account)
          logger.info("%s OTP resent: id=%s", self.kind.label, account.id)
          return account

     def login(self, email: str, password: str) -> Tuple[Account, str]:
          account = self.accounts.find_by_email(email, with_secrets=True)
          if account is None or not verify_password(password, account.password):
               logger.info("%s login failed for %s", self.kind.label, normalize_email(email))
               raise InvalidCredentials()
          if not account.is_verified:
               raise NotVerified()
          if self.kind.can_be_deactivated and not account.is_active:
               raise AccountDeactivated()
          return account, self.issue_token(account)

     def get_account(self, account_id: int) -> Account:
          account = self.accounts.get(account_id)
          if account is None:
               raise NotFound(f"{self.kind.label} not found")
          return account

     def update_profile(self, account_id: int, changes: dict) -> Account:
          """
          Owner-only profile update.

          - email: must stay unique (the caller's own record excluded)
          - new_password: requires the correct current_password
          Remaining keys are assigned as-is.
          """
          account = self.accounts.get(account_id, with_secrets=True)
          if account is None:
               raise NotFound(f"{self.kind.label} not found")

          changes = dict(changes)
          email = changes.pop("email", None)
          current_password = changes.pop("current_password", None)
          new_password = changes.pop("new_password", None)

          if email is not None:
               email = normalize_email(email)
               if email != account.email:
                    if self.accounts.email_taken(email, exclude_id=account.id):
                         raise DuplicateIdentity(f"{self.kind.label} already exists with this email")
                    account.email = email

          if new_password is not None:
               if not current_password:
                    raise InvalidInput("Current password is required to set a new password")
               if not verify_password(current_password, account.password):
                    raise InvalidCredentials("Incorrect current password")
               _check_password_length(new_password)
               account.password = hash_password(new_password)

          for field, value in changes.items():
               setattr(account, field, value)

          return self.accounts.save(account)

     def list_users(self, page: Optional[int]) -> Page:
          query = self.db.query(User).order_by(User.created_at.desc(), User.id.desc())
          return paginate(query, page)
