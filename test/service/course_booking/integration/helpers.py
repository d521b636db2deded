from typing import Any

from sqlalchemy import func, select

from src.platform.database.db_setting import Database, get_session_maker
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.course_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.course_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.course_booking.app.command.create_course_use_case import CreateCourseUseCase
from src.service.course_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.course_booking.app.query.has_user_booked_course_use_case import (
    HasUserBookedCourseUseCase,
)
from src.service.course_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.course_booking.domain.entity.course_entity import Course
from src.service.course_booking.driven_adapter.model.booking_model import BookingModel
from src.service.course_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.course_booking.driven_adapter.repo.course_query_repo_impl import (
    CourseQueryRepoImpl,
)


async def create_course(
    *, total_seats: int, available_seats: int | None = None, **fields: Any
) -> Course:
    use_case = CreateCourseUseCase(uow=SqlAlchemyUnitOfWork())
    return await use_case.create_course(
        title=fields.get('title', 'Python for Beginners'),
        description=fields.get('description', 'Basics'),
        level=fields.get('level', 'Beginner'),
        category=fields.get('category', 'Programming'),
        total_seats=total_seats,
        available_seats=available_seats,
        duration=fields.get('duration', '6 weeks'),
        rating=fields.get('rating', 4.5),
    )


async def available_seats(course_id: int) -> int:
    course = await CourseQueryRepoImpl(session_factory=Database().session).get_by_id(
        course_id=course_id
    )
    assert course is not None
    return course.available_seats


async def count_bookings(**filters: int) -> int:
    stmt = select(func.count()).select_from(BookingModel)
    for column, value in filters.items():
        stmt = stmt.where(getattr(BookingModel, column) == value)
    async with get_session_maker()() as session:
        return (await session.execute(stmt)).scalar_one()


def create_booking_use_case() -> CreateBookingUseCase:
    return CreateBookingUseCase(uow=SqlAlchemyUnitOfWork())


def cancel_booking_use_case() -> CancelBookingUseCase:
    return CancelBookingUseCase(uow=SqlAlchemyUnitOfWork())


def booking_query_repo() -> BookingQueryRepoImpl:
    return BookingQueryRepoImpl(session_factory=Database().session)


def get_booking_use_case() -> GetBookingUseCase:
    return GetBookingUseCase(booking_query_repo=booking_query_repo())


def list_bookings_use_case() -> ListBookingsUseCase:
    return ListBookingsUseCase(booking_query_repo=booking_query_repo())


def has_user_booked_course_use_case() -> HasUserBookedCourseUseCase:
    return HasUserBookedCourseUseCase(booking_query_repo=booking_query_repo())
