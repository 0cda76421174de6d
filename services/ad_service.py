"""
Ad Service - listing lifecycle and public queries.

Mutations are scoped to the owning user. A missing ad and an ad owned by
someone else both raise the same NotFound, so existence is never leaked.
"""
import logging
from typing import List, Optional

from sqlalchemy import func, true
from sqlalchemy.orm import Session, selectinload

from models import Ad, Category, DurationUnit
from services.exceptions import InvalidInput, NotFound

logger = logging.getLogger(__name__)

BUCKET_SIZE = 4

# Public bucket routes -> duration unit served. The "day" route serves hour
# ads; kept as-is for client compatibility.
DURATION_BUCKETS = {
     "day": DurationUnit.HOUR,
     "week": DurationUnit.WEEK,
     "month": DurationUnit.MONTH,
     "year": DurationUnit.YEAR,
}

UPDATABLE_FIELDS = ("title", "description", "platform", "price", "contact_email")

LIKE_ESCAPE = "/"


def escape_like(term: str) -> str:
     """Escape LIKE wildcards, including SQL Server's `[` character classes."""
     for char in (LIKE_ESCAPE, "%", "_", "["):
          term = term.replace(char, LIKE_ESCAPE + char)
     return term


class AdService:
     """Service class for ad-related business logic."""

     def __init__(self, db: Session):
          self.db = db

     def _newest_first(self, query):
          return query.order_by(Ad.created_at.desc(), Ad.id.desc())

     def _with_relations(self, query):
          return query.options(selectinload(Ad.category), selectinload(Ad.owner))

     def _ensure_platform(self, platform_id: int) -> None:
          if self.db.get(Category, platform_id) is None:
               raise InvalidInput("Platform does not reference an existing category")

     def post(
          self,
          owner_id: int,
          title: str,
          description: str,
          platform: int,
          price,
          duration: dict,
          contact_email: str,
     ) -> Ad:
          if duration.get("value") is None or not duration.get("unit"):
               raise InvalidInput("Duration requires both value and unit")
          self._ensure_platform(platform)

          ad = Ad(
               title=title,
               description=description,
               platform_id=platform,
               price=price,
               contact_email=contact_email.lower(),
               user_id=owner_id,
               created_by=owner_id,
               updated_by=owner_id,
               is_active=True,
          )
          ad.set_duration(duration["value"], duration["unit"])
          self.db.add(ad)
          self.db.commit()
          self.db.refresh(ad)
          logger.info("Ad posted: id=%s user=%s", ad.id, owner_id)
          return ad

     def list_public(self, search: Optional[str] = None) -> List[Ad]:
          """Active ads, newest first, optionally filtered by a literal title substring."""
          query = self.db.query(Ad).filter(Ad.is_active == true())
          if search:
               query = query.filter(
                    func.lower(Ad.title).contains(escape_like(search.lower()), escape=LIKE_ESCAPE)
               )
          return self._with_relations(self._newest_first(query)).all()

     def list_by_duration_unit(self, unit, limit: int = BUCKET_SIZE) -> List[Ad]:
          query = self.db.query(Ad).filter(
               Ad.is_active == true(),
               Ad.duration_unit == DurationUnit(unit),
          )
          return self._with_relations(self._newest_first(query)).limit(limit).all()

     def list_bucket(self, bucket: str) -> List[Ad]:
          return self.list_by_duration_unit(DURATION_BUCKETS[bucket])

     def get_by_id(self, ad_id: int) -> Ad:
          ad = self._with_relations(self.db.query(Ad)).filter(Ad.id == ad_id).first()
          if ad is None:
               raise NotFound("Ad not found")
          return ad

     def get_details_by_id(self, ad_id: int) -> Ad:
          ad = self.get_by_id(ad_id)
          if ad.owner is None:
               raise NotFound("Ad owner not found")
          return ad

     def mine(self, owner_id: int) -> List[Ad]:
          query = self.db.query(Ad).filter(Ad.user_id == owner_id)
          return self._with_relations(self._newest_first(query)).all()

     def mine_by_id(self, owner_id: int, ad_id: int) -> Ad:
          ad = (
               self._with_relations(self.db.query(Ad))
               .filter(Ad.id == ad_id, Ad.user_id == owner_id)
               .first()
          )
          if ad is None:
               raise NotFound("Ad not found")
          return ad

     def update(self, owner_id: int, ad_id: int, changes: dict) -> Ad:
          """
          Partial update. Keys absent from `changes` stay unchanged; a
          `duration` must carry both value and unit.
          """
          ad = self.mine_by_id(owner_id, ad_id)

          if "duration" in changes and changes["duration"] is not None:
               duration = changes["duration"]
               if duration.get("value") is None or not duration.get("unit"):
                    raise InvalidInput("Duration requires both value and unit")
               ad.set_duration(duration["value"], duration["unit"])

          for field in UPDATABLE_FIELDS:
               value = changes.get(field)
               if value is None:
                    continue
               if field == "platform":
                    self._ensure_platform(value)
                    ad.platform_id = value
               elif field == "contact_email":
                    ad.contact_email = value.lower()
               else:
                    setattr(ad, field, value)

          ad.updated_by = owner_id
          self.db.commit()
          self.db.refresh(ad)
          return ad

     def deactivate(self, owner_id: int, ad_id: int) -> Ad:
          """Soft delete; repeating it is a successful no-op."""
          ad = self.mine_by_id(owner_id, ad_id)
          ad.deactivate()
          ad.updated_by = owner_id
          self.db.commit()
          self.db.refresh(ad)
          logger.info("Ad deactivated: id=%s user=%s", ad.id, owner_id)
          return ad
