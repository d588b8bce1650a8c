# 📄 File: sportclub/shared/infrastructure/database/repository.py
# 🧭 Purpose (Layman Explanation):
# Common plumbing for every database repository: it makes sure a slow or broken database
# shows up as one clear "store unavailable" error instead of hanging or leaking driver errors.
#
# 🧪 Purpose (Technical Summary):
# Base class for SQLAlchemy repository implementations. Wraps each statement in a call-level
# timeout and translates driver/IO failures into StoreUnavailableError.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - sportclub.shared.config.settings (DB_COMMAND_TIMEOUT)
# - sportclub.shared.core.exceptions
#
# 🔄 Connected Modules / Calls From:
# - MemberRepositoryImpl, SportRepositoryImpl, SubscriptionRepositoryImpl

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sportclub.shared.config.settings import get_settings
from sportclub.shared.core.exceptions import (
    DatabaseError,
    SportClubException,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SQLAlchemyRepository:
    """
    Shared behaviour for repositories backed by an AsyncSession.

    Subclasses set ``table_name`` and route every awaitable database call
    through ``_guard`` so that business code only ever sees domain errors
    or StoreUnavailableError.
    """

    table_name: str = ""

    def __init__(self, session: AsyncSession, timeout: Optional[float] = None):
        self._session = session
        self._timeout = timeout if timeout is not None else get_settings().DB_COMMAND_TIMEOUT

    @property
    def session(self) -> AsyncSession:
        return self._session

    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once, after the session's current transaction commits."""
        event.listen(
            self._session.sync_session,
            "after_commit",
            lambda session: callback(),
            once=True,
        )

    async def _guard(
        self,
        operation: str,
        awaitable: Awaitable[T],
        on_conflict: Optional[Callable[[], SportClubException]] = None
    ) -> T:
        """
        Await a database call under the configured timeout.

        Args:
            operation: Short operation name for logs and error details
            awaitable: The pending session call
            on_conflict: Builds the domain error for a constraint violation

        Raises:
            StoreUnavailableError: On timeout, driver or connection failure
            DatabaseError: On an unexpected constraint violation
        """
        try:
            return await asyncio.wait_for(awaitable, timeout=self._timeout)
        except IntegrityError as e:
            if on_conflict is not None:
                raise on_conflict() from e
            logger.error(f"Constraint violation in {self.table_name}.{operation}: {e}")
            raise DatabaseError(
                f"Constraint violation: {operation}",
                operation=operation,
                table=self.table_name,
            ) from e
        except asyncio.TimeoutError as e:
            logger.error(f"Store call {self.table_name}.{operation} timed out after {self._timeout}s")
            raise StoreUnavailableError(
                f"Store call timed out: {operation}",
                operation=operation,
                table=self.table_name,
                timed_out=True,
            ) from e
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Store call {self.table_name}.{operation} failed: {e}")
            raise StoreUnavailableError(
                f"Store call failed: {operation}",
                operation=operation,
                table=self.table_name,
            ) from e

    async def _execute(self, operation: str, statement: Any, on_conflict=None):
        return await self._guard(operation, self._session.execute(statement), on_conflict)

    async def _flush(self, operation: str, on_conflict=None) -> None:
        await self._guard(operation, self._session.flush(), on_conflict)
