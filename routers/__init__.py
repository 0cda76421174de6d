from .auth import router as auth_router
from .users import router as users_router
from .admin import router as admin_router
from .category import router as category_router
from .public import router as public_router
from .ads import router as ads_router

__all__ = [
     "auth_router",
     "users_router",
     "admin_router",
     "category_router",
     "public_router",
     "ads_router",
]
