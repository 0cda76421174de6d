# utils/email.py
import logging
import os
from dataclasses import dataclass
from typing import Optional

import requests
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

BREVO_KEY = os.getenv("BREVO_API_KEY")
MAIL_API_URL = os.getenv("MAIL_API_URL", "https://api.brevo.com/v3/smtp/email")
MAIL_SENDER_EMAIL = os.getenv("MAIL_SENDER_EMAIL", "noreply@slotshare.app")
MAIL_SENDER_NAME = os.getenv("MAIL_SENDER_NAME", "SlotShare")
MAIL_TIMEOUT_SECONDS = float(os.getenv("MAIL_TIMEOUT_SECONDS", "10"))


class EmailDeliveryError(Exception):
     """Raised when the transactional mail API is not configured or rejects a message."""


@dataclass
class OtpEmail:
     subject: str
     intro: str


class BrevoMailer:
     """
     Sends transactional email through the Brevo HTTP API.

     Created once per process and reused; holds a pooled requests.Session.
     """

     def __init__(
          self,
          api_key: Optional[str] = None,
          api_url: str = MAIL_API_URL,
          sender_email: str = MAIL_SENDER_EMAIL,
          sender_name: str = MAIL_SENDER_NAME,
          timeout: float = MAIL_TIMEOUT_SECONDS,
     ):
          self.api_key = api_key
          self.api_url = api_url
          self.sender_email = sender_email
          self.sender_name = sender_name
          self.timeout = timeout
          self._http = requests.Session()

     def send_otp_email(self, to_email: str, otp: str, template: OtpEmail, expiry_minutes: int) -> None:
          if not self.api_key:
               raise EmailDeliveryError("BREVO_API_KEY is not set")

          try:
               response = self._http.post(
                    self.api_url,
                    headers={
                         "api-key": self.api_key,
                         "Content-Type": "application/json",
                    },
                    json={
                         "sender": {"name": self.sender_name, "email": self.sender_email},
                         "to": [{"email": to_email}],
                         "subject": template.subject,
                         "textContent": (
                              f"{template.intro}: {otp}. "
                              f"It expires in {expiry_minutes} minutes."
                         ),
                         "htmlContent": f"""
                              <p>{template.intro}:</p>
                              <h2>{otp}</h2>
                              <p>This code expires in {expiry_minutes} minutes.</p>
                         """,
                    },
                    timeout=self.timeout,
               )
          except requests.RequestException as e:
               raise EmailDeliveryError(f"Mail API request failed: {e}") from e

          if response.status_code not in (200, 201, 202):
               raise EmailDeliveryError(f"Brevo error: {response.text}")
          logger.info("OTP email accepted for %s", to_email)


_mailer: Optional[BrevoMailer] = None


def get_default_mailer() -> BrevoMailer:
     """Process-wide mailer, built on first use from the environment."""
     global _mailer
     if _mailer is None:
          _mailer = BrevoMailer(api_key=BREVO_KEY)
     return _mailer
