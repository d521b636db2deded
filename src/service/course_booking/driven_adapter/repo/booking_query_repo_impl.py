from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Dict, List

from sqlalchemy import Select, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.course_booking.driven_adapter.model.booking_model import BookingModel


DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def _format_datetime(value: datetime | None) -> str | None:
    return value.strftime(DATETIME_FORMAT) if value else None


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    @staticmethod
    def _with_details() -> Select:
        return select(BookingModel).options(
            selectinload(BookingModel.user),
            selectinload(BookingModel.course),
        )

    @staticmethod
    def _to_booking_dict(db_booking: BookingModel) -> Dict[str, Any]:
        # user/course may be gone: bookings only hold weak references
        user = None
        if db_booking.user is not None:
            user = {
                'id': db_booking.user.id,
                'name': db_booking.user.name,
                'email': db_booking.user.email,
            }

        course = None
        if db_booking.course is not None:
            db_course = db_booking.course
            course = {
                'id': db_course.id,
                'title': db_course.title,
                'description': db_course.description,
                'level': db_course.level,
                'duration': db_course.duration,
                'rating': db_course.rating,
                'image_url': db_course.image_url,
                'available_seats': db_course.available_seats,
                'total_seats': db_course.total_seats,
            }

        return {
            'id': db_booking.id,
            'user': user,
            'course': course,
            'booking_date': _format_datetime(db_booking.created_at),
            'created_at': _format_datetime(db_booking.created_at),
            'updated_at': _format_datetime(db_booking.updated_at),
        }

    async def _list(self, stmt: Select) -> List[Dict[str, Any]]:
        async with self._get_session() as session:
            result = await session.execute(stmt.order_by(BookingModel.id))
            return [self._to_booking_dict(db_booking) for db_booking in result.scalars().all()]

    @Logger.io
    async def get_by_id_with_details(self, *, booking_id: int) -> Dict[str, Any] | None:
        async with self._get_session() as session:
            result = await session.execute(
                self._with_details().where(BookingModel.id == booking_id)
            )
            db_booking = result.scalar_one_or_none()
            if not db_booking:
                return None
            return self._to_booking_dict(db_booking)

    @Logger.io
    async def list_all_with_details(self) -> List[Dict[str, Any]]:
        return await self._list(self._with_details())

    @Logger.io
    async def list_by_user_with_details(self, *, user_id: int) -> List[Dict[str, Any]]:
        return await self._list(self._with_details().where(BookingModel.user_id == user_id))

    @Logger.io
    async def list_by_course_with_details(self, *, course_id: int) -> List[Dict[str, Any]]:
        return await self._list(self._with_details().where(BookingModel.course_id == course_id))

    @Logger.io
    async def exists_for_user_and_course(self, *, user_id: int, course_id: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(
                    exists().where(
                        BookingModel.user_id == user_id,
                        BookingModel.course_id == course_id,
                    )
                )
            )
            return bool(result.scalar())
