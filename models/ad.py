import enum
from sqlalchemy import (
     Column, Integer, String, Text, Numeric, Boolean, ForeignKey, Enum, CheckConstraint
)
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class DurationUnit(str, enum.Enum):
     """Rental duration units."""
     HOUR = "hour"
     DAY = "day"
     WEEK = "week"
     MONTH = "month"
     YEAR = "year"


class Ad(TimestampMixin, Base):
     """
     Ad model - a user's offer to rent a slot on a subscription platform.

     `user_id` is the access-control owner; `created_by` / `updated_by` are
     audit references. Ads are never hard deleted, only deactivated.
     """
     __tablename__ = "ads"
     __table_args__ = (
          CheckConstraint("price >= 0", name="ck_ads_price_non_negative"),
          CheckConstraint("duration_value >= 1", name="ck_ads_duration_value_positive"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     title = Column(String(200), nullable=False)
     description = Column(Text, nullable=False)
     platform_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
     price = Column(Numeric(12, 2), nullable=False)
     duration_value = Column(Integer, nullable=False)
     duration_unit = Column(
          Enum(
               DurationUnit,
               name="duration_unit",
               create_constraint=True,
               values_callable=lambda units: [u.value for u in units],
          ),
          nullable=False,
          index=True
     )
     contact_email = Column(String(255), nullable=False)

     # Ownership and audit references
     user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
     created_by = Column(Integer, ForeignKey("users.id"), nullable=False)
     updated_by = Column(Integer, ForeignKey("users.id"), nullable=False)

     is_active = Column(Boolean, default=True, nullable=False, index=True)

     # Relationships
     owner = relationship("User", back_populates="ads", foreign_keys=[user_id])
     category = relationship("Category", back_populates="ads")

     def __repr__(self):
          return f"<Ad(id={self.id}, title='{self.title}', active={self.is_active})>"

     @property
     def duration(self) -> dict:
          return {"value": self.duration_value, "unit": self.duration_unit}

     def set_duration(self, value: int, unit) -> None:
          self.duration_value = value
          self.duration_unit = DurationUnit(unit)

     def deactivate(self) -> None:
          """Soft delete."""
          self.is_active = False
