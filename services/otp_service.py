"""
OTP engine - issue and verify one-time passcodes for email verification.

A code is a 4-digit string in [1000, 9999]. Issuing always sends the email
first and only then touches the account, so a failed send never leaves a
half-initialized record behind.
"""
import logging
import os
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from dotenv import load_dotenv

from services.account_repository import Account, AccountKind, AccountRepository
from services.exceptions import InvalidOrExpiredOtp, UpstreamUnavailable
from utils.email import EmailDeliveryError

load_dotenv()

logger = logging.getLogger(__name__)

OTP_EXPIRY_MINUTES = int(os.getenv("OTP_EXPIRY_MINUTES", "10"))


def utcnow() -> datetime:
     """Naive UTC, matching the DateTime columns."""
     return datetime.now(timezone.utc).replace(tzinfo=None)


def generate_otp() -> str:
     return str(1000 + secrets.randbelow(9000))


class OtpService:
     def __init__(self, repository: AccountRepository, mailer, expiry_minutes: Optional[int] = None):
          self.repository = repository
          self.mailer = mailer
          self.expiry_minutes = expiry_minutes or OTP_EXPIRY_MINUTES

     @property
     def kind(self) -> AccountKind:
          return self.repository.kind

     def new_code(self) -> tuple[str, datetime]:
          return generate_otp(), utcnow() + timedelta(minutes=self.expiry_minutes)

     def send(self, email: str, otp: str) -> None:
          try:
               self.mailer.send_otp_email(email, otp, self.kind.otp_email, self.expiry_minutes)
          except EmailDeliveryError as e:
               logger.warning("OTP email to %s failed: %s", email, e)
               raise UpstreamUnavailable(f"Could not send verification email: {e}") from e

     def reissue(self, account: Account) -> Account:
          """Send a fresh code, then persist it and mark the account unverified."""
          otp, expires_at = self.new_code()
          self.send(account.email, otp)
          account.set_otp(otp, expires_at)
          account.is_verified = False
          return self.repository.save(account)

     def verify(self, email: str, otp: str) -> Account:
          account = self.repository.find_by_email_and_otp(email, otp)
          if account is None or account.otp_expires_at is None or account.otp_expires_at <= utcnow():
               raise InvalidOrExpiredOtp()
          account.clear_otp()
          account.is_verified = True
          return self.repository.save(account)
