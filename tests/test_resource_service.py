"""
PetCarePlus Backend: Store Failure Tests
==========================================

What:  Every service operation turns a SQLAlchemy error into DatabaseError
       and rolls back, without leaking the driver message.
How:   A mock AsyncSession whose execute() raises OperationalError.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from petcareplus.exceptions import DatabaseError, NotFoundError, ValidationError
from petcareplus.schemas.auth import LoginRequest
from petcareplus.schemas.owner import OwnerCreate, OwnerUpdate
from petcareplus.schemas.pet import PetCreate
from petcareplus.services.auth_service import auth_service
from petcareplus.services.export_service import export_service
from petcareplus.services.owner_service import owner_service
from petcareplus.services.pet_service import pet_service

OWNER = OwnerCreate(owner_id=1, first_name="Jane", last_name="Doe", email="jane@x.io")
NAMELESS_PET = PetCreate(pet_id=1, owner_id=1, name="", species="Cat", gender="F")


@pytest.fixture
def broken_session(mock_db_session):
    mock_db_session.execute.side_effect = OperationalError(
        "SELECT 1", {}, Exception("connection refused")
    )
    return mock_db_session


class TestDatabaseErrors:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", ["list", "get", "create", "update", "delete"])
    async def test_owner_operations(self, broken_session, operation):
        calls = {
            "list": lambda: owner_service.list_all(broken_session),
            "get": lambda: owner_service.get(broken_session, "1"),
            "create": lambda: owner_service.create(broken_session, OWNER),
            "update": lambda: owner_service.update(broken_session, "1", OwnerUpdate(**OWNER.model_dump())),
            "delete": lambda: owner_service.delete(broken_session, "1"),
        }
        with pytest.raises(DatabaseError) as exc_info:
            await calls[operation]()

        assert exc_info.value.message == "Database error"
        assert exc_info.value.context["operation"] == operation
        assert "connection refused" not in exc_info.value.message
        broken_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_login_lookup(self, broken_session):
        with pytest.raises(DatabaseError):
            await auth_service.login(broken_session, LoginRequest(email="a@b.co", password="x"))

    @pytest.mark.asyncio
    async def test_export(self, broken_session):
        with pytest.raises(DatabaseError):
            await export_service.export_owners_csv(broken_session)

    @pytest.mark.asyncio
    async def test_validation_happens_before_any_statement(self, broken_session):
        with pytest.raises(ValidationError):
            await pet_service.create(broken_session, NAMELESS_PET)
        broken_session.execute.assert_not_awaited()


class TestRowCounts:

    @pytest.mark.asyncio
    async def test_zero_rows_deleted_is_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=0)
        with pytest.raises(NotFoundError) as exc_info:
            await pet_service.delete(mock_db_session, 5)
        assert exc_info.value.message == "Pet not found"
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_one_row_deleted(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)
        await pet_service.delete(mock_db_session, "5")
        mock_db_session.rollback.assert_not_awaited()
