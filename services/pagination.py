import math
from dataclasses import dataclass
from typing import Any, List, Optional

PAGE_SIZE = 10


@dataclass
class Page:
     items: List[Any]
     total: int
     page: int
     pages: int
     page_size: int


def normalize_page(page: Optional[int]) -> int:
     return page if page and page > 0 else 1


def paginate(query, page: Optional[int], page_size: int = PAGE_SIZE) -> Page:
     """Apply offset/limit to an already ordered query."""
     page = normalize_page(page)
     total = query.count()
     items = query.offset((page - 1) * page_size).limit(page_size).all()
     return Page(
          items=items,
          total=total,
          page=page,
          pages=math.ceil(total / page_size),
          page_size=page_size,
     )
