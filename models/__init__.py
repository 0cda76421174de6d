from .base import Base
from .account import Role
from .user import User
from .admin import Admin
from .category import Category
from .ad import Ad, DurationUnit

__all__ = [
     "Base",
     "Role",
     "User",
     "Admin",
     "Category",
     "Ad",
     "DurationUnit",
]
