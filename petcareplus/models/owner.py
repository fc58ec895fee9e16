"""
PetCarePlus Backend: Owner SQLAlchemy Model
=============================================

What:  ORM model for the `Owner` table.
Who:   Used by OwnerService (CRUD) and ExportService (CSV export).

Table notes:
    - owner_id is supplied by the caller, never generated; inserting an
      existing id is a constraint error.
    - phone and address are optional in the API and stored as "" when omitted.
    - Pets reference owners by owner_id with no enforced foreign key.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petcareplus.database import Base


class Owner(Base):
    """A pet owner registered with the clinic."""

    __tablename__ = "Owner"

    owner_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Owner(owner_id={self.owner_id}, email='{self.email}')>"
