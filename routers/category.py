"""
Category routes mounted at /category (authenticated).
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from dependencies import get_category_service, protect, require_user_account
from schemas import ApiResponse, CategoryCreate, CategoryResponse
from schemas.common import pagination_from
from services.category_service import CategoryService
from services.token_service import TokenData

router = APIRouter(prefix="/category", tags=["category"])


@router.post(
     "/add",
     response_model=ApiResponse[CategoryResponse],
     status_code=status.HTTP_201_CREATED,
     summary="Add a category"
)
def add_category(
     body: CategoryCreate,
     identity: TokenData = Depends(require_user_account),
     categories: CategoryService = Depends(get_category_service)
):
     entry = categories.add(identity.id, body.category, body.platform)
     return ApiResponse(message="Category added successfully", data=CategoryResponse.model_validate(entry))


@router.get(
     "/all",
     response_model=ApiResponse[List[CategoryResponse]],
     summary="List categories (paginated)"
)
def list_categories(
     page: Optional[int] = Query(None, description="Page number (10 per page)"),
     identity: TokenData = Depends(protect),
     categories: CategoryService = Depends(get_category_service)
):
     result = categories.list_page(page)
     return ApiResponse(
          data=[CategoryResponse.model_validate(entry) for entry in result.items],
          pagination=pagination_from(result),
     )
