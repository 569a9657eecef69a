"""
SQLAlchemy implementation of the storage gateway.

PRE-COMMIT CONTRACT
===================

  1. Run the validator against the candidate record (awaiting it if needed)
  2. On failure: raise, leaving the ORM instance untouched
  3. On success: copy the normalized fields onto the instance and flush
  4. A unique index violation at flush rolls the session back and raises
     DuplicateKeyError naming the column

Timestamps are left to the database (server defaults / onupdate).

The existence check is a single SELECT EXISTS bounded by
EXISTENCE_CHECK_TIMEOUT. Failures are reported as DependencyUnavailableError,
never as a missing event, and are not retried here.
"""

import asyncio
import inspect
import time
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.errors import DependencyUnavailableError, DomainError, DuplicateKeyError, ErrorCode
from app.core.logging import get_logger
from app.core.metrics import existence_check_latency, record_existence_check, record_write
from app.db.base import Base
from app.models.event import Event
from app.services.interfaces.storage import StorageGateway
from app.validation.records import Record

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
RecordT = TypeVar("RecordT", bound=Record)
Validator = Callable[[RecordT], Union[RecordT, Awaitable[RecordT]]]


# Range of the Integer primary key columns; anything outside cannot be stored
MIN_RECORD_ID = 1
MAX_RECORD_ID = 2**31 - 1


def parse_record_id(value: Any) -> Optional[int]:
    """Coerce a raw identifier to an integer primary key, or None if it cannot be one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, int) and MIN_RECORD_ID <= value <= MAX_RECORD_ID:
        return value
    return None


class SQLAlchemyGateway(StorageGateway):
    """Storage gateway bound to one request-scoped AsyncSession."""

    def __init__(self, session: AsyncSession, timeout: Optional[float] = None):
        self._session = session
        self._timeout = timeout if timeout is not None else get_settings().EXISTENCE_CHECK_TIMEOUT

    async def exists(self, event_id: Any) -> bool:
        key = parse_record_id(event_id)
        if key is None:
            record_existence_check("missing")
            return False

        start = time.perf_counter()
        try:
            result = await asyncio.wait_for(
                self._session.execute(select(exists().where(Event.id == key))),
                timeout=self._timeout,
            )
        except (SQLAlchemyError, asyncio.TimeoutError, OSError) as e:
            record_existence_check("error")
            logger.error("existence_check_failed", event_id=key, error=str(e))
            raise DependencyUnavailableError("exists") from e
        finally:
            existence_check_latency.observe(time.perf_counter() - start)

        found = bool(result.scalar())
        record_existence_check("found" if found else "missing")
        return found

    async def precommit(
        self,
        instance: ModelT,
        candidate: RecordT,
        validator: Validator,
    ) -> ModelT:
        """Validate `candidate`, apply it to `instance` and flush."""
        record = type(instance).__name__.lower()

        try:
            normalized = validator(candidate)
            if inspect.isawaitable(normalized):
                normalized = await normalized
        except DomainError as e:
            record_write(record, e.code.value)
            logger.info(
                "write_rejected",
                record=record,
                code=e.code.value,
                field=e.field,
                value_type=e.value_type,
            )
            raise

        for field, value in normalized.as_dict().items():
            setattr(instance, field, value)
        self._session.add(instance)

        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            field = self._violated_unique_field(instance, e)
            record_write(record, ErrorCode.DUPLICATE_KEY.value)
            logger.warning("duplicate_key", record=record, field=field)
            raise DuplicateKeyError(field) from e

        await self._session.refresh(instance)
        record_write(record, "committed")
        return instance

    @staticmethod
    def _violated_unique_field(instance: Base, error: IntegrityError) -> str:
        message = str(error.orig)
        table = type(instance).__table__
        unique_columns = [
            column.name
            for index in table.indexes
            if index.unique
            for column in index.columns
        ]
        for name in unique_columns:
            if name in message:
                return name
        return unique_columns[0] if unique_columns else "id"
