"""
Unit tests for CreateBookingUseCase

Test Focus:
1. Happy path: seat taken through the ledger, booking inserted, transaction committed
2. Fail Fast ordering: course missing, no seats, duplicate booking
3. Lost race: ledger refuses the seat even though the read showed one left
"""

from datetime import datetime, timezone

import pytest

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.service.course_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.course_booking.domain.entity.booking_entity import Booking
from src.service.course_booking.domain.entity.course_entity import Course
from test.service.course_booking.unit.fake_unit_of_work import FakeUnitOfWork


def _course(*, available_seats: int, total_seats: int = 10) -> Course:
    return Course(
        id=1,
        title='Python for Beginners',
        description='Basics',
        level='Beginner',
        category='Programming',
        total_seats=total_seats,
        available_seats=available_seats,
    )


@pytest.mark.unit
class TestCreateBookingUseCase:
    @pytest.fixture
    def uow(self) -> FakeUnitOfWork:
        return FakeUnitOfWork()

    @pytest.fixture
    def use_case(self, uow: FakeUnitOfWork) -> CreateBookingUseCase:
        return CreateBookingUseCase(uow=uow)

    @pytest.mark.asyncio
    async def test_books_seat_and_commits(
        self, uow: FakeUnitOfWork, use_case: CreateBookingUseCase
    ) -> None:
        uow.course_command_repo.get_by_id_for_update.return_value = _course(available_seats=3)
        uow.booking_command_repo.find_by_user_and_course.return_value = None
        uow.seat_ledger.reduce.return_value = True
        uow.booking_command_repo.create.side_effect = lambda booking: Booking(
            id=42,
            user_id=booking.user_id,
            course_id=booking.course_id,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )

        booking = await use_case.create_booking(course_id=1, user_id=7)

        assert booking.id == 42
        assert booking.user_id == 7
        assert booking.course_id == 1
        uow.seat_ledger.reduce.assert_awaited_once_with(course_id=1, n=1)
        inserted = uow.booking_command_repo.create.await_args.kwargs['booking']
        assert inserted.created_at is not None
        assert inserted.created_at.tzinfo == timezone.utc
        assert inserted.created_at <= datetime.now(timezone.utc)
        assert uow.committed is True

    @pytest.mark.asyncio
    async def test_missing_course_raises_not_found(
        self, uow: FakeUnitOfWork, use_case: CreateBookingUseCase
    ) -> None:
        uow.course_command_repo.get_by_id_for_update.return_value = None

        with pytest.raises(NotFoundError, match='Course not found'):
            await use_case.create_booking(course_id=999, user_id=7)

        uow.seat_ledger.reduce.assert_not_awaited()
        uow.booking_command_repo.create.assert_not_awaited()
        assert uow.committed is False
        assert uow.rollback_count == 1

    @pytest.mark.asyncio
    async def test_full_course_raises_conflict_before_duplicate_check(
        self, uow: FakeUnitOfWork, use_case: CreateBookingUseCase
    ) -> None:
        uow.course_command_repo.get_by_id_for_update.return_value = _course(available_seats=0)

        with pytest.raises(ConflictError, match='No available seats for this course'):
            await use_case.create_booking(course_id=1, user_id=7)

        uow.booking_command_repo.find_by_user_and_course.assert_not_awaited()
        uow.seat_ledger.reduce.assert_not_awaited()
        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_duplicate_booking_raises_conflict(
        self, uow: FakeUnitOfWork, use_case: CreateBookingUseCase
    ) -> None:
        uow.course_command_repo.get_by_id_for_update.return_value = _course(available_seats=5)
        uow.booking_command_repo.find_by_user_and_course.return_value = Booking(
            id=3, user_id=7, course_id=1
        )

        with pytest.raises(ConflictError, match='You have already booked this course'):
            await use_case.create_booking(course_id=1, user_id=7)

        uow.booking_command_repo.find_by_user_and_course.assert_awaited_once_with(
            user_id=7, course_id=1
        )
        uow.seat_ledger.reduce.assert_not_awaited()
        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_lost_seat_race_raises_conflict_without_insert(
        self, uow: FakeUnitOfWork, use_case: CreateBookingUseCase
    ) -> None:
        uow.course_command_repo.get_by_id_for_update.return_value = _course(available_seats=1)
        uow.booking_command_repo.find_by_user_and_course.return_value = None
        uow.seat_ledger.reduce.return_value = False

        with pytest.raises(ConflictError, match='Failed to book course'):
            await use_case.create_booking(course_id=1, user_id=7)

        uow.booking_command_repo.create.assert_not_awaited()
        assert uow.committed is False
