"""
PetCarePlus Backend: WeatherLog SQLAlchemy Model
==================================================

What:  ORM model for the append-only `WeatherLog` table.
Who:   Written by WeatherService after each successful provider call;
       read (newest first) by the weather logs endpoint.

Table notes:
    - id and logged_at are generated by the store.
    - Rows are never updated or deleted by the application.
    - Index on logged_at DESC backs the "latest 50" query.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from petcareplus.database import Base


class WeatherLog(Base):
    """One recorded current-conditions reading for a supported city."""

    __tablename__ = "WeatherLog"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    temperature_c: Mapped[float] = mapped_column(Float, nullable=False)
    windspeed: Mapped[float] = mapped_column(Float, nullable=False)
    logged_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_weatherlog_logged_at", logged_at.desc()),
    )

    def __repr__(self) -> str:
        return (
            f"<WeatherLog(id={self.id}, city='{self.city}', "
            f"temperature_c={self.temperature_c}, logged_at='{self.logged_at}')>"
        )
