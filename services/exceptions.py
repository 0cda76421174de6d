"""
Service-layer error taxonomy.

Every error carries the HTTP status it maps to and a client-safe message;
main.py renders them as `{"success": false, "message": ...}`.
"""
from typing import Optional


class ServiceError(Exception):
     """Base class for expected, client-facing failures."""

     status_code = 500
     default_message = "Internal server error"

     def __init__(self, message: Optional[str] = None):
          self.message = message or self.default_message
          super().__init__(self.message)


class InvalidInput(ServiceError):
     status_code = 400
     default_message = "Invalid input"


class DuplicateIdentity(ServiceError):
     status_code = 400
     default_message = "An account already exists with this email"


class InvalidOrExpiredOtp(ServiceError):
     status_code = 400
     default_message = "Invalid or expired OTP"


class InvalidCredentials(ServiceError):
     status_code = 401
     default_message = "Invalid email or password"


class AccountDeactivated(ServiceError):
     status_code = 401
     default_message = "Your account has been deactivated"


class Unauthorized(ServiceError):
     status_code = 401
     default_message = "Not authorized, token missing or invalid"


class NotVerified(ServiceError):
     status_code = 403
     default_message = "Please verify your account before logging in"


class Forbidden(ServiceError):
     status_code = 403
     default_message = "You do not have permission to perform this action"


class NotFound(ServiceError):
     status_code = 404
     default_message = "Resource not found"


class UpstreamUnavailable(ServiceError):
     status_code = 500
     default_message = "Email service is unavailable"
