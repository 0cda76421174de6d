"""
Category catalog - (category, platform) reference data and startup seeding.
"""
import logging
import os
from typing import List, Tuple

from dotenv import load_dotenv
from sqlalchemy.orm import Session

from models import Admin, Category, Role, User
from services.auth_service import hash_password
from services.pagination import Page, paginate

load_dotenv()

logger = logging.getLogger(__name__)

SEED_ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL", "admin@gmail.com").lower()
SEED_ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD", "Admin@123")
SEED_ADMIN_NAME = "Admin"

DEFAULT_CATEGORIES = [
     ("Video Streaming", "Netflix"),
     ("Video Streaming", "YouTube"),
     ("Video Streaming", "Hotstar"),
     ("Video Streaming", "Hulu"),
     ("Video Streaming", "Amazon Prime"),
     ("Video Streaming", "HBO Max"),
     ("Audio Streaming", "Spotify"),
     ("Audio Streaming", "SoundCloud"),
     ("Audio Streaming", "Audible"),
     ("Audio Streaming", "Apple Music"),
     ("Online Storage", "Google Drive"),
     ("Online Storage", "Dropbox"),
     ("Online Storage", "OneDrive"),
]


class CategoryService:
     """Service class for category reference data."""

     def __init__(self, db: Session):
          self.db = db

     def _newest_first(self):
          return self.db.query(Category).order_by(Category.created_at.desc(), Category.id.desc())

     def add(self, creator_id: int, category: str, platform: str) -> Category:
          # Duplicates are allowed here; only the seeder deduplicates.
          entry = Category(
               category=category,
               platform=platform,
               user_id=creator_id,
               created_by=creator_id,
               updated_by=creator_id,
          )
          self.db.add(entry)
          self.db.commit()
          self.db.refresh(entry)
          return entry

     def list_page(self, page) -> Page:
          return paginate(self._newest_first(), page)

     def list_all(self) -> List[Category]:
          return self._newest_first().all()


def ensure_seed_accounts(db: Session) -> Tuple[Admin, User]:
     """
     Make sure the pre-verified system admin exists, plus a matching user
     record that seeded categories can reference.
     """
     admin = db.query(Admin).filter(Admin.email == SEED_ADMIN_EMAIL).first()
     if admin is None:
          admin = Admin(
               full_name=SEED_ADMIN_NAME,
               email=SEED_ADMIN_EMAIL,
               password=hash_password(SEED_ADMIN_PASSWORD),
               is_verified=True,
          )
          db.add(admin)

     user = db.query(User).filter(User.email == SEED_ADMIN_EMAIL).first()
     if user is None:
          user = User(
               first_name=SEED_ADMIN_NAME,
               last_name="Seeder",
               email=SEED_ADMIN_EMAIL,
               phone="0000000000",
               password=hash_password(SEED_ADMIN_PASSWORD),
               role=Role.ADMIN.value,
               is_verified=True,
               is_active=True,
          )
          db.add(user)

     db.flush()
     return admin, user


def seed_categories(db: Session) -> int:
     """
     Idempotent startup seeding. Returns the number of categories created.
     """
     _, user = ensure_seed_accounts(db)

     created = 0
     for category, platform in DEFAULT_CATEGORIES:
          exists = (
               db.query(Category.id)
               .filter(Category.category == category, Category.platform == platform)
               .first()
          )
          if exists:
               continue
          db.add(Category(
               category=category,
               platform=platform,
               user_id=user.id,
               created_by=user.id,
               updated_by=user.id,
          ))
          created += 1

     db.commit()
     logger.info("Default admin seeded and categories ensured (%d created).", created)
     return created
