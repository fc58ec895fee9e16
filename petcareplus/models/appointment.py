"""
PetCarePlus Backend: Appointment SQLAlchemy Model
===================================================

What:  ORM model for the `Appointment` table.

pet_id and vet_id are unchecked integers; there is no vet table.
"""

from datetime import date, time

from sqlalchemy import Date, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from petcareplus.database import Base


class Appointment(Base):
    __tablename__ = "Appointment"

    appointment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    pet_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    vet_id: Mapped[int] = mapped_column(Integer, nullable=False)
    appointment_date: Mapped[date] = mapped_column(Date, nullable=False)
    appointment_time: Mapped[time] = mapped_column(Time, nullable=False)
    reason: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Appointment(appointment_id={self.appointment_id}, pet_id={self.pet_id}, "
            f"date='{self.appointment_date}', status='{self.status}')>"
        )
