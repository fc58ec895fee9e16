"""
PetCarePlus Backend: Export Routes
====================================

GET /api/export/owners.csv (admin): the Owner table as a CSV download.
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.auth import require_admin
from petcareplus.database import get_db_session
from petcareplus.services.export_service import OWNER_CSV_FILENAME, export_service

router = APIRouter(prefix="/api/export", tags=["Export"])


@router.get(
    "/owners.csv",
    dependencies=[Depends(require_admin)],
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}, "description": "Owners as CSV"}},
    summary="Export all owners as CSV (admin)",
)
async def export_owners(db: AsyncSession = Depends(get_db_session)) -> Response:
    csv_text = await export_service.export_owners_csv(db)
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{OWNER_CSV_FILENAME}"'},
    )
