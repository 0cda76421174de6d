import enum
from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import declared_attr, deferred


class Role(str, enum.Enum):
     """Roles encoded into session tokens."""
     USER = "user"
     ADMIN = "admin"


# Deferred columns are excluded from default loads; credential checks
# request them explicitly with undefer_group(SECRET_GROUP).
SECRET_GROUP = "secrets"


class AccountMixin:
     """
     Columns shared by every account table (users, admins).

     `otp` and `otp_expires_at` are always set or cleared together.
     """

     email = Column(String(255), unique=True, nullable=False, index=True)
     is_verified = Column(Boolean, default=False, nullable=False)

     @declared_attr
     def password(cls):
          return deferred(Column(String(255), nullable=False), group=SECRET_GROUP)

     @declared_attr
     def otp(cls):
          return deferred(Column(String(10), nullable=True), group=SECRET_GROUP)

     @declared_attr
     def otp_expires_at(cls):
          return deferred(Column(DateTime, nullable=True), group=SECRET_GROUP)

     def set_otp(self, code: str, expires_at) -> None:
          self.otp = code
          self.otp_expires_at = expires_at

     def clear_otp(self) -> None:
          self.otp = None
          self.otp_expires_at = None
