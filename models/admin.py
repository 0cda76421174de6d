from sqlalchemy import Column, Integer, String
from .base import Base, TimestampMixin
from .account import AccountMixin, Role


class Admin(AccountMixin, TimestampMixin, Base):
     """
     Admin model - moderators authenticated separately from users.
     Admins have no deactivation path.
     """
     __tablename__ = "admins"

     id = Column(Integer, primary_key=True, autoincrement=True)
     full_name = Column(String(200), nullable=False)

     @property
     def role(self) -> str:
          return Role.ADMIN.value

     def __repr__(self):
          return f"<Admin(id={self.id}, email='{self.email}')>"
