"""
Unit tests for CancelBookingUseCase

Test Focus:
1. Owner cancels: seat released, row deleted, committed
2. Missing booking reports False instead of raising
3. Non-owner is refused before any write
4. A booking deleted by a concurrent cancel releases no seat
"""

import pytest

from src.platform.exception.exceptions import ForbiddenError
from src.service.course_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.course_booking.domain.entity.booking_entity import Booking
from test.service.course_booking.unit.fake_unit_of_work import FakeUnitOfWork


@pytest.mark.unit
class TestCancelBookingUseCase:
    @pytest.fixture
    def uow(self) -> FakeUnitOfWork:
        return FakeUnitOfWork()

    @pytest.fixture
    def use_case(self, uow: FakeUnitOfWork) -> CancelBookingUseCase:
        return CancelBookingUseCase(uow=uow)

    @pytest.mark.asyncio
    async def test_owner_cancels_and_seat_is_released(
        self, uow: FakeUnitOfWork, use_case: CancelBookingUseCase
    ) -> None:
        uow.booking_command_repo.get_by_id_for_update.return_value = Booking(
            id=5, user_id=7, course_id=2
        )
        uow.seat_ledger.increase.return_value = True
        uow.booking_command_repo.delete.return_value = True

        result = await use_case.cancel_booking(booking_id=5, user_id=7)

        assert result is True
        uow.seat_ledger.increase.assert_awaited_once_with(course_id=2, n=1)
        uow.booking_command_repo.delete.assert_awaited_once_with(booking_id=5)
        assert uow.committed is True

    @pytest.mark.asyncio
    async def test_missing_booking_returns_false(
        self, uow: FakeUnitOfWork, use_case: CancelBookingUseCase
    ) -> None:
        uow.booking_command_repo.get_by_id_for_update.return_value = None

        result = await use_case.cancel_booking(booking_id=404, user_id=7)

        assert result is False
        uow.seat_ledger.increase.assert_not_awaited()
        uow.booking_command_repo.delete.assert_not_awaited()
        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(
        self, uow: FakeUnitOfWork, use_case: CancelBookingUseCase
    ) -> None:
        uow.booking_command_repo.get_by_id_for_update.return_value = Booking(
            id=5, user_id=7, course_id=2
        )

        with pytest.raises(ForbiddenError, match='Unauthorized to cancel this booking'):
            await use_case.cancel_booking(booking_id=5, user_id=8)

        uow.seat_ledger.increase.assert_not_awaited()
        uow.booking_command_repo.delete.assert_not_awaited()
        assert uow.committed is False
        assert uow.rollback_count == 1

    @pytest.mark.asyncio
    async def test_booking_already_deleted_releases_no_seat(
        self, uow: FakeUnitOfWork, use_case: CancelBookingUseCase
    ) -> None:
        uow.booking_command_repo.get_by_id_for_update.return_value = Booking(
            id=5, user_id=7, course_id=2
        )
        uow.booking_command_repo.delete.return_value = False

        result = await use_case.cancel_booking(booking_id=5, user_id=7)

        assert result is False
        uow.booking_command_repo.delete.assert_awaited_once_with(booking_id=5)
        uow.seat_ledger.increase.assert_not_awaited()
        assert uow.committed is False
        assert uow.rollback_count == 1
