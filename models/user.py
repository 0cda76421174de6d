from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin
from .account import AccountMixin, Role


class User(AccountMixin, TimestampMixin, Base):
     """
     User model - marketplace members who post and manage ads.
     Maps to the 'users' table.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     first_name = Column(String(100), nullable=False)
     last_name = Column(String(100), nullable=False)
     phone = Column(String(50), nullable=False)
     address = Column(String(255), nullable=True)
     city = Column(String(100), nullable=True)
     state = Column(String(100), nullable=True)
     zip_code = Column(String(20), nullable=True)
     role = Column(String(50), default=Role.USER.value, nullable=False)  # user, admin (seed user)
     is_active = Column(Boolean, default=True, nullable=False)

     # Relationships
     ads = relationship("Ad", back_populates="owner", foreign_keys="Ad.user_id")

     @property
     def full_name(self) -> str:
          return f"{self.first_name} {self.last_name}".strip()

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
