"""
Course Seat Ledger (SQLAlchemy)

Each operation is a single UPDATE whose WHERE/CASE clause carries the guard,
so the check and the write happen atomically in the database:

- reduce:   available_seats - n   WHERE available_seats >= n
- increase: MIN(available_seats + n, total_seats)

Two transactions racing for the last seat both issue the conditional UPDATE;
the second one waits on the row lock and then matches zero rows.
"""

from sqlalchemy import case, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_course_seat_ledger import ICourseSeatLedger
from src.service.course_booking.driven_adapter.model.course_model import CourseModel


class CourseSeatLedgerImpl(ICourseSeatLedger):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _validate_amount(n: int) -> None:
        if n < 1:
            raise ValueError(f'Seat amount must be at least 1, got {n}')

    @Logger.io
    async def reduce(self, *, course_id: int, n: int) -> bool:
        self._validate_amount(n)
        result = await self.session.execute(
            update(CourseModel)
            .where(CourseModel.id == course_id, CourseModel.available_seats >= n)
            .values(available_seats=CourseModel.available_seats - n)
            .execution_options(synchronize_session=False)
        )
        reduced = result.rowcount == 1  # type: ignore[attr-defined]
        if not reduced:
            Logger.base.warning(f'🪑 [LEDGER] Could not take {n} seat(s) from course {course_id}')
        return reduced

    @Logger.io
    async def increase(self, *, course_id: int, n: int) -> bool:
        self._validate_amount(n)
        released = CourseModel.available_seats + n
        result = await self.session.execute(
            update(CourseModel)
            .where(CourseModel.id == course_id)
            .values(
                available_seats=case(
                    (released > CourseModel.total_seats, CourseModel.total_seats),
                    else_=released,
                )
            )
            .execution_options(synchronize_session=False)
        )
        increased = result.rowcount == 1  # type: ignore[attr-defined]
        if not increased:
            Logger.base.warning(f'🪑 [LEDGER] Course {course_id} missing, {n} seat(s) not released')
        return increased
