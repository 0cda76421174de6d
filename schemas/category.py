"""
Pydantic schemas for category reference data.
"""
from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, ConfigDict, Field

from schemas.common import CamelModel


class CategoryCreate(CamelModel):
     model_config = ConfigDict(str_strip_whitespace=True)

     category: str = Field(..., min_length=1, max_length=100)
     platform: str = Field(..., min_length=1, max_length=100)


class CategoryResponse(CamelModel):
     id: int
     category_id: str
     category: str
     platform: str
     user: int = Field(..., validation_alias=AliasChoices("user", "user_id"))
     created_by: int
     updated_by: int
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None
