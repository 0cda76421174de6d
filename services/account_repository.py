"""
Credential store - persistence for user and admin accounts.

Emails are normalized to lowercase before storage and lookup. Secret columns
(password, otp, otp_expires_at) are deferred and only loaded when a lookup
asks for them.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Type, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, undefer_group

from models import Admin, User
from models.account import SECRET_GROUP
from services.exceptions import DuplicateIdentity
from utils.email import OtpEmail

logger = logging.getLogger(__name__)

Account = Union[User, Admin]


@dataclass(frozen=True)
class AccountKind:
     """Everything that differs between the user and admin account flows."""
     name: str
     model: Type
     label: str
     otp_email: OtpEmail
     can_be_deactivated: bool
     requires_password_confirmation: bool


USER_ACCOUNT = AccountKind(
     name="user",
     model=User,
     label="User",
     otp_email=OtpEmail(
          subject="Verify your account",
          intro="Use the following OTP to verify your account",
     ),
     can_be_deactivated=True,
     requires_password_confirmation=True,
)

ADMIN_ACCOUNT = AccountKind(
     name="admin",
     model=Admin,
     label="Admin",
     otp_email=OtpEmail(
          subject="Admin registration OTP",
          intro="Use the following OTP to verify your admin account",
     ),
     can_be_deactivated=False,
     requires_password_confirmation=False,
)


def normalize_email(email: str) -> str:
     return email.strip().lower()


class AccountRepository:
     """findByEmail / create / save over one account table."""

     def __init__(self, db: Session, kind: AccountKind):
          self.db = db
          self.kind = kind
          self.model = kind.model

     def _query(self, with_secrets: bool = False):
          query = self.db.query(self.model)
          if with_secrets:
               query = query.options(undefer_group(SECRET_GROUP))
          return query

     def get(self, account_id: int, with_secrets: bool = False) -> Optional[Account]:
          return self._query(with_secrets).filter(self.model.id == account_id).first()

     def find_by_email(self, email: str, with_secrets: bool = False) -> Optional[Account]:
          return (
               self._query(with_secrets)
               .filter(self.model.email == normalize_email(email))
               .first()
          )

     def find_by_email_and_otp(self, email: str, otp: str) -> Optional[Account]:
          return (
               self._query(with_secrets=True)
               .filter(self.model.email == normalize_email(email), self.model.otp == otp)
               .first()
          )

     def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
          query = self.db.query(self.model.id).filter(self.model.email == normalize_email(email))
          if exclude_id is not None:
               query = query.filter(self.model.id != exclude_id)
          return query.first() is not None

     def create(self, **fields) -> Account:
          fields["email"] = normalize_email(fields["email"])
          account = self.model(**fields)
          self.db.add(account)
          return self.save(account)

     def save(self, account: Account) -> Account:
          """Commit pending changes; unique email violations become DuplicateIdentity."""
          try:
               self.db.commit()
          except IntegrityError:
               self.db.rollback()
               logger.info("%s email conflict on save: %s", self.kind.label, account.email)
               raise DuplicateIdentity(f"{self.kind.label} already exists with this email")
          self.db.refresh(account)
          return account
