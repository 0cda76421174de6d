"""
Pydantic schemas for Ad API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import AliasChoices, ConfigDict, EmailStr, Field, field_serializer

from models.ad import DurationUnit
from schemas.common import CamelModel
from schemas.category import CategoryResponse


class Duration(CamelModel):
     value: int = Field(..., ge=1, description="Number of units (at least 1)")
     unit: DurationUnit


class DurationPatch(CamelModel):
     """Both parts are checked for presence by the service."""
     value: Optional[int] = Field(None, ge=1)
     unit: Optional[DurationUnit] = None


class AdCreate(CamelModel):
     """Schema for posting a new ad."""
     title: str = Field(..., min_length=1, max_length=200)
     description: str = Field(..., min_length=1)
     platform: int = Field(..., gt=0, description="Category ID")
     price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Rental price")
     duration: Duration
     contact_email: EmailStr

     model_config = ConfigDict(
          str_strip_whitespace=True,
          json_schema_extra={
               "example": {
                    "title": "Netflix premium slot",
                    "description": "One 4K screen, shared family plan",
                    "platform": 1,
                    "price": 9.99,
                    "duration": {"value": 2, "unit": "week"},
                    "contactEmail": "bob@x.com"
               }
          }
     )


class AdUpdate(CamelModel):
     """Schema for updating an ad; omitted fields are left unchanged."""
     model_config = ConfigDict(str_strip_whitespace=True)

     title: Optional[str] = Field(None, min_length=1, max_length=200)
     description: Optional[str] = Field(None, min_length=1)
     platform: Optional[int] = Field(None, gt=0)
     price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     duration: Optional[DurationPatch] = None
     contact_email: Optional[EmailStr] = None


class PosterResponse(CamelModel):
     """Public profile of the user who posted an ad."""
     id: int
     first_name: str
     last_name: str


class PosterContact(PosterResponse):
     name: str = Field(..., validation_alias=AliasChoices("name", "full_name"))
     email: str
     phone: str


class AdResponse(CamelModel):
     """Schema for ad response."""
     id: int
     title: str
     description: str
     platform: int = Field(..., validation_alias=AliasChoices("platform", "platform_id"))
     price: Decimal
     duration: Duration
     contact_email: str
     user: int = Field(..., validation_alias=AliasChoices("user", "user_id"))
     created_by: int
     updated_by: int
     is_active: bool
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     @field_serializer("price")
     def serialize_price(self, price: Decimal) -> float:
          return float(price)


class AdPublicResponse(AdResponse):
     """Ad with its platform category and poster embedded."""
     category: Optional[CategoryResponse] = None
     poster: Optional[PosterResponse] = Field(None, validation_alias=AliasChoices("poster", "owner"))


class AdDetailsResponse(AdResponse):
     category: Optional[CategoryResponse] = None
     poster: PosterContact = Field(..., validation_alias=AliasChoices("poster", "owner"))
