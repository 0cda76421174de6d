"""
Pydantic schemas for account registration, verification and profiles.

Response models never declare password, otp or otp_expires_at, so those
columns cannot leak into a payload.
"""
from datetime import datetime
from typing import Optional
from pydantic import ConfigDict, EmailStr, Field, field_validator

from schemas.common import CamelModel


class _EmailModel(CamelModel):
     email: EmailStr = Field(..., description="Account email (case-insensitive)")

     @field_validator("email")
     @classmethod
     def lowercase_email(cls, value: str) -> str:
          return value.lower()


class UserRegisterRequest(_EmailModel):
     """Schema for registering a marketplace user."""
     first_name: str = Field(..., min_length=1, max_length=100)
     last_name: str = Field(..., min_length=1, max_length=100)
     mobile: str = Field(..., min_length=1, max_length=50)
     password: str = Field(..., min_length=6)
     confirm_password: str = Field(..., min_length=1)
     address: Optional[str] = Field(None, max_length=255)
     city: Optional[str] = Field(None, max_length=100)
     state: Optional[str] = Field(None, max_length=100)
     zip: Optional[str] = Field(None, max_length=20)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "firstName": "Bob",
                    "lastName": "Stone",
                    "email": "bob@x.com",
                    "mobile": "5550100",
                    "password": "pw123456",
                    "confirmPassword": "pw123456"
               }
          }
     )


class AdminRegisterRequest(_EmailModel):
     """Schema for registering an admin."""
     full_name: str = Field(..., min_length=3, max_length=200)
     password: str = Field(..., min_length=6)


class LoginRequest(_EmailModel):
     password: str = Field(..., min_length=1)


class VerifyOtpRequest(_EmailModel):
     otp: str = Field(..., min_length=1, max_length=10)

     @field_validator("otp", mode="before")
     @classmethod
     def otp_as_text(cls, value):
          if isinstance(value, int) and not isinstance(value, bool):
               return str(value)
          return value


class ResendOtpRequest(_EmailModel):
     pass


class UserProfileUpdate(CamelModel):
     """Any field may be omitted; omitted fields stay unchanged."""
     first_name: Optional[str] = Field(None, min_length=1, max_length=100)
     last_name: Optional[str] = Field(None, min_length=1, max_length=100)
     phone: Optional[str] = Field(None, min_length=1, max_length=50)
     address: Optional[str] = Field(None, max_length=255)
     city: Optional[str] = Field(None, max_length=100)
     state: Optional[str] = Field(None, max_length=100)
     zip: Optional[str] = Field(None, max_length=20)
     email: Optional[EmailStr] = None
     current_password: Optional[str] = None
     new_password: Optional[str] = Field(None, min_length=6)

     def to_changes(self) -> dict:
          changes = self.model_dump(exclude_unset=True, exclude_none=True)
          if "zip" in changes:
               changes["zip_code"] = changes.pop("zip")
          return changes


class AccountResponse(CamelModel):
     id: int
     email: str
     role: str
     is_verified: bool
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None


class UserResponse(AccountResponse):
     """Schema for user response (no secrets)."""
     first_name: str
     last_name: str
     phone: str
     address: Optional[str] = None
     city: Optional[str] = None
     state: Optional[str] = None
     zip_code: Optional[str] = Field(None, alias="zip")
     is_active: bool


class AdminResponse(AccountResponse):
     """Schema for admin response (no secrets)."""
     full_name: str


class AuthData(CamelModel):
     """Payload of a successful login / OTP verification."""
     token: str
     account: UserResponse | AdminResponse
