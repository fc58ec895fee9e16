"""
PetCarePlus Backend: Resource Service Base
============================================

What:  The shared list / get / create / update / delete workflow behind the
       Owner, Pet and Appointment endpoints.
How:   Each operation validates its input, issues exactly one SQL statement,
       commits, and translates the outcome:
           - key not an integer          → ValidationError (400)
           - key outside the INTEGER
             column range                → NotFoundError (404), no statement issued
           - no row / zero rows matched  → NotFoundError (404)
           - any SQLAlchemyError, or a
             value the driver cannot bind → DatabaseError (500), detail logged
Who:   Subclassed by OwnerService, PetService and AppointmentService, which
       supply the model, the response schema and the body validation.

There are no retries: a failed statement fails the request.
"""

import logging
from typing import Any, Dict, Generic, List, NoReturn, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.database import Base
from petcareplus.exceptions import DatabaseError, NotFoundError, ValidationError
from petcareplus.validators import to_int

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Range of the 32-bit INTEGER key columns
KEY_MIN = -(2 ** 31)
KEY_MAX = 2 ** 31 - 1

# SQLite raises a bare OverflowError for ints past 64 bits
STORE_ERRORS = (SQLAlchemyError, OverflowError)


class ResourceService(Generic[SchemaT]):
    """
    CRUD over one table keyed by a caller-supplied integer.

    Subclasses set:
        model:            SQLAlchemy model class
        response_schema:  Pydantic schema rows are serialized into
        resource_name:    Display name used in messages ("Owner")
        key_name:         Primary key column ("owner_id")

    and implement `validate_create` / `validate_update`, which turn a request
    body into column values or raise ValidationError.
    """

    model: Type[Base]
    response_schema: Type[SchemaT]
    resource_name: str
    key_name: str

    # ── Validation hooks ──────────────────────────────────────────────────

    def validate_create(self, payload: Any) -> Dict[str, Any]:
        """Column values for an INSERT, including the primary key."""
        raise NotImplementedError

    def validate_update(self, payload: Any) -> Dict[str, Any]:
        """Column values for an UPDATE, excluding the primary key."""
        raise NotImplementedError

    def parse_id(self, raw_id: Any) -> int:
        """
        Coerce a path id.

        Raises:
            ValidationError: not an integer ("Invalid <key>")
            NotFoundError:   an integer no key column can hold, so no row has it
        """
        resource_id = to_int(raw_id)
        if resource_id is None:
            raise ValidationError(f"Invalid {self.key_name}", field=self.key_name)
        if not KEY_MIN <= resource_id <= KEY_MAX:
            raise NotFoundError(resource=self.resource_name, resource_id=resource_id)
        return resource_id

    @property
    def _key_column(self):
        return getattr(self.model, self.key_name)

    async def _fail(
        self, db: AsyncSession, operation: str, exc: Exception, **context: Any
    ) -> NoReturn:
        logger.error("DB error in %s %s: %s", operation, self.resource_name, exc, exc_info=True)
        await db.rollback()
        raise DatabaseError(
            context={"operation": operation, "resource": self.resource_name, **context}
        ) from exc

    # ── Operations ────────────────────────────────────────────────────────

    async def list_all(self, db: AsyncSession) -> List[SchemaT]:
        """Every row, ordered by key. No paging, no filtering."""
        try:
            result = await db.execute(select(self.model).order_by(self._key_column))
            rows = result.scalars().all()
        except STORE_ERRORS as e:
            await self._fail(db, "list", e)
        return [self.response_schema.model_validate(row) for row in rows]

    async def get(self, db: AsyncSession, raw_id: Any) -> SchemaT:
        """
        Single row by key.

        Raises:
            ValidationError: raw_id is not an integer
            NotFoundError:   no row has that key
            DatabaseError:   the query failed
        """
        resource_id = self.parse_id(raw_id)
        try:
            result = await db.execute(
                select(self.model).where(self._key_column == resource_id)
            )
            row = result.scalar_one_or_none()
        except STORE_ERRORS as e:
            await self._fail(db, "get", e, resource_id=resource_id)

        if row is None:
            raise NotFoundError(resource=self.resource_name, resource_id=resource_id)
        return self.response_schema.model_validate(row)

    async def create(self, db: AsyncSession, payload: Any) -> int:
        """
        Insert a new row and return its key.

        A key that already exists fails at the store as a constraint error
        and is reported as DatabaseError like any other store failure.
        """
        values = self.validate_create(payload)
        resource_id = values[self.key_name]
        try:
            await db.execute(insert(self.model).values(**values))
            await db.commit()
        except STORE_ERRORS as e:
            await self._fail(db, "create", e, resource_id=resource_id)

        logger.info("%s %s created", self.resource_name, resource_id)
        return resource_id

    async def update(self, db: AsyncSession, raw_id: Any, payload: Any) -> None:
        """Overwrite every mutable column; NotFoundError when no row matched."""
        resource_id = self.parse_id(raw_id)
        values = self.validate_update(payload)
        try:
            result = await db.execute(
                update(self.model).where(self._key_column == resource_id).values(**values)
            )
            await db.commit()
        except STORE_ERRORS as e:
            await self._fail(db, "update", e, resource_id=resource_id)

        if result.rowcount == 0:
            raise NotFoundError(resource=self.resource_name, resource_id=resource_id)
        logger.info("%s %s updated", self.resource_name, resource_id)

    async def delete(self, db: AsyncSession, raw_id: Any) -> None:
        """Delete by key; deleting a missing key is NotFoundError, never DatabaseError."""
        resource_id = self.parse_id(raw_id)
        try:
            result = await db.execute(
                delete(self.model).where(self._key_column == resource_id)
            )
            await db.commit()
        except STORE_ERRORS as e:
            await self._fail(db, "delete", e, resource_id=resource_id)

        if result.rowcount == 0:
            raise NotFoundError(resource=self.resource_name, resource_id=resource_id)
        logger.info("%s %s deleted", self.resource_name, resource_id)
