"""
PetCarePlus Backend: Export Service
=====================================

What:  Serializes the whole Owner table to CSV.
How:   Columns come from OWNER_CSV_COLUMNS, in that order, regardless of how
       the store orders its columns. Fields are escaped with to_csv_value,
       joined with "," and lines with "\\n".

An empty table yields the header line followed by a newline; a non-empty
table has no trailing newline after the last row.
"""

import logging
from typing import Any, Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.exceptions import DatabaseError
from petcareplus.models.owner import Owner
from petcareplus.validators import to_csv_value

logger = logging.getLogger(__name__)

OWNER_CSV_COLUMNS = ("owner_id", "first_name", "last_name", "phone", "email", "address")
OWNER_CSV_FILENAME = "owners.csv"


def render_csv(rows: Sequence[Any], columns: Iterable[str]) -> str:
    """Render objects (read by attribute) as CSV text with a header line."""
    columns = tuple(columns)
    header = ",".join(columns)
    if not rows:
        return header + "\n"
    lines = [header]
    for row in rows:
        lines.append(",".join(to_csv_value(getattr(row, column)) for column in columns))
    return "\n".join(lines)


class ExportService:

    async def export_owners_csv(self, db: AsyncSession) -> str:
        try:
            result = await db.execute(select(Owner).order_by(Owner.owner_id))
            owners = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("DB error exporting owners: %s", e, exc_info=True)
            raise DatabaseError(context={"table": "Owner"}) from e

        logger.info("Exporting %d owners to CSV", len(owners))
        return render_csv(owners, OWNER_CSV_COLUMNS)


export_service = ExportService()
