"""
PetCarePlus Backend: Pet SQLAlchemy Model
===========================================

What:  ORM model for the `Pet` table.

owner_id is a plain integer column: a pet may point at an owner that does
not exist, and deleting an owner leaves its pets in place.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petcareplus.database import Base


class Pet(Base):
    __tablename__ = "Pet"

    pet_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    species: Mapped[str] = mapped_column(String(50), nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    owner_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Pet(pet_id={self.pet_id}, name='{self.name}', species='{self.species}')>"
