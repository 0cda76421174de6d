import uuid
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


def _new_category_id() -> str:
     return uuid.uuid4().hex


class Category(TimestampMixin, Base):
     """
     Category model - (category, platform) reference pairs that ads point to.

     `category_id` is a generated public identifier, distinct from the
     primary key and never changed after insert.
     """
     __tablename__ = "categories"

     id = Column(Integer, primary_key=True, autoincrement=True)
     category_id = Column(String(32), unique=True, nullable=False, default=_new_category_id)
     category = Column(String(100), nullable=False)
     platform = Column(String(100), nullable=False)

     # Ownership and audit references
     user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
     created_by = Column(Integer, ForeignKey("users.id"), nullable=False)
     updated_by = Column(Integer, ForeignKey("users.id"), nullable=False)

     # Relationships
     ads = relationship("Ad", back_populates="category")

     def __repr__(self):
          return f"<Category(id={self.id}, category='{self.category}', platform='{self.platform}')>"
