"""
Unit of Work Pattern - one session, one transaction, shared by the command repositories

Architecture:
- UoW owns the session lifecycle (opened on enter, closed on exit)
- UoW owns commit/rollback; repositories never commit
- Leaving the block without commit rolls everything back
- Store errors raised inside the block surface as TransactionFailureError
"""

from __future__ import annotations

import abc
from types import TracebackType
from typing import TYPE_CHECKING, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.db_setting import get_session_maker
from src.platform.exception.exceptions import TransactionFailureError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.course_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.course_booking.app.interface.i_course_command_repo import (
        ICourseCommandRepo,
    )
    from src.service.course_booking.app.interface.i_course_seat_ledger import ICourseSeatLedger


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the booking core

    Usage:
        async with uow:
            course = await uow.course_command_repo.get_by_id_for_update(course_id=1)
            if await uow.seat_ledger.reduce(course_id=1, n=1):
                await uow.booking_command_repo.create(booking=...)
            await uow.commit()
    """

    course_command_repo: ICourseCommandRepo
    seat_ledger: ICourseSeatLedger
    booking_command_repo: IBookingCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh AsyncSession is opened per `async with` block, so one instance
    must not be entered concurrently. Create one UoW per request.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession] | None = None) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.course_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.course_booking.driven_adapter.repo.course_command_repo_impl import (
            CourseCommandRepoImpl,
        )
        from src.service.course_booking.driven_adapter.repo.course_seat_ledger_impl import (
            CourseSeatLedgerImpl,
        )

        # Resolved here so the engine binds to the running event loop
        session_factory = self.session_factory or get_session_maker()
        self.session = session_factory()

        # Repositories share the UoW session
        self.course_command_repo = CourseCommandRepoImpl(session=self.session)
        self.seat_ledger = CourseSeatLedgerImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)

        await super().__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

        if isinstance(exc, SQLAlchemyError):
            Logger.base.error(f'💥 [UoW] Transaction aborted: {type(exc).__name__}: {exc}')
            raise TransactionFailureError() from exc

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of work used outside its context')
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            Logger.base.error(f'💥 [UoW] Commit failed: {type(e).__name__}: {e}')
            raise TransactionFailureError() from e

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()


def get_unit_of_work() -> AbstractUnitOfWork:
    """FastAPI dependency for Unit of Work (one per request)"""
    return SqlAlchemyUnitOfWork()
