"""
Public, unauthenticated read routes mounted at /public.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from dependencies import get_ad_service, get_category_service
from schemas import AdPublicResponse, ApiResponse, CategoryResponse
from services.ad_service import AdService
from services.category_service import CategoryService

router = APIRouter(prefix="/public", tags=["public"])


def _ads_response(items) -> ApiResponse[List[AdPublicResponse]]:
     return ApiResponse(data=[AdPublicResponse.model_validate(ad) for ad in items])


@router.get("/categories", response_model=ApiResponse[List[CategoryResponse]])
def all_categories(categories: CategoryService = Depends(get_category_service)):
     return ApiResponse(data=[CategoryResponse.model_validate(entry) for entry in categories.list_all()])


@router.get("/allAds", response_model=ApiResponse[List[AdPublicResponse]])
def all_ads(
     query: Optional[str] = Query(None, description="Case-insensitive literal title search"),
     ads: AdService = Depends(get_ad_service)
):
     return _ads_response(ads.list_public(query))


@router.get("/dayAds", response_model=ApiResponse[List[AdPublicResponse]])
def day_ads(ads: AdService = Depends(get_ad_service)):
     """Serves the newest hour-duration ads."""
     return _ads_response(ads.list_bucket("day"))


@router.get("/weekAds", response_model=ApiResponse[List[AdPublicResponse]])
def week_ads(ads: AdService = Depends(get_ad_service)):
     return _ads_response(ads.list_bucket("week"))


@router.get("/monthAds", response_model=ApiResponse[List[AdPublicResponse]])
def month_ads(ads: AdService = Depends(get_ad_service)):
     return _ads_response(ads.list_bucket("month"))


@router.get("/yearAds", response_model=ApiResponse[List[AdPublicResponse]])
def year_ads(ads: AdService = Depends(get_ad_service)):
     return _ads_response(ads.list_bucket("year"))
