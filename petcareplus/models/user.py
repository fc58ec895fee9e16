"""
PetCarePlus Backend: Credential & Role Store Models
=====================================================

What:  ORM models for the `users` (credentials) and `user_accounts` (roles)
       tables.
Who:   Read by AuthService during login; never written by the API.

A user with no `user_accounts` row logs in with the role "user".
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petcareplus.database import Base


class User(Base):
    """Login credentials, matched on email and password."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class UserAccount(Base):
    """Role assignment keyed by email: guest, user or admin."""

    __tablename__ = "user_accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="user")

    def __repr__(self) -> str:
        return f"<UserAccount(email='{self.email}', role='{self.role}')>"
