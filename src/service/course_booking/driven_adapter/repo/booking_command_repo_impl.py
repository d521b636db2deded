from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.course_booking.domain.entity.booking_entity import Booking
from src.service.course_booking.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            course_id=db_booking.course_id,
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def get_by_id_for_update(self, *, booking_id: int) -> Booking | None:
        result = await self.session.execute(
            select(BookingModel).where(BookingModel.id == booking_id).with_for_update()
        )
        db_booking = result.scalar_one_or_none()
        if not db_booking:
            return None
        return self._to_entity(db_booking)

    @Logger.io
    async def find_by_user_and_course(self, *, user_id: int, course_id: int) -> Booking | None:
        result = await self.session.execute(
            select(BookingModel)
            .where(BookingModel.user_id == user_id, BookingModel.course_id == course_id)
            .limit(1)
        )
        db_booking = result.scalar_one_or_none()
        if not db_booking:
            return None
        return self._to_entity(db_booking)

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        db_booking = BookingModel(
            user_id=booking.user_id,
            course_id=booking.course_id,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )
        self.session.add(db_booking)
        await self.session.flush()
        await self.session.refresh(db_booking)

        Logger.base.info(
            f'💾 [BOOKING] Inserted booking {db_booking.id} '
            f'(user={booking.user_id}, course={booking.course_id})'
        )
        return self._to_entity(db_booking)

    @Logger.io
    async def delete(self, *, booking_id: int) -> bool:
        result = await self.session.execute(
            delete(BookingModel)
            .where(BookingModel.id == booking_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1  # type: ignore[attr-defined]
