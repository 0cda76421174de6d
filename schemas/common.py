"""
Shared response envelope and base model configuration.

Wire names are camelCase; Python attributes stay snake_case.
"""
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
     """Base for every request/response schema."""

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
     )


class Pagination(CamelModel):
     total: int
     page: int
     pages: int
     page_size: int


class ApiResponse(CamelModel, Generic[T]):
     """Response envelope used by every endpoint."""
     success: bool = True
     message: Optional[str] = None
     data: Optional[T] = None
     pagination: Optional[Pagination] = None


class ErrorDetail(CamelModel):
     field: str
     message: str


class ErrorResponse(CamelModel):
     success: bool = False
     message: str
     errors: Optional[list[ErrorDetail]] = None


class IdRequest(CamelModel):
     """Body for the POST-based lookup endpoints."""
     id: int = Field(..., gt=0, description="Ad ID")


def pagination_from(page) -> Pagination:
     return Pagination(total=page.total, page=page.page, pages=page.pages, page_size=page.page_size)
