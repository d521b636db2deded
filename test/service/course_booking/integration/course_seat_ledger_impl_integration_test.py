import pytest

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from test.service.course_booking.integration.helpers import available_seats, create_course
from test.util_constant import NONEXISTENT_COURSE_ID


@pytest.mark.integration
class TestCourseSeatLedger:
    @pytest.mark.asyncio
    async def test_reduce_takes_seats(self) -> None:
        course = await create_course(total_seats=3)

        async with SqlAlchemyUnitOfWork() as uow:
            assert await uow.seat_ledger.reduce(course_id=course.id, n=2) is True
            await uow.commit()

        assert await available_seats(course.id) == 1

    @pytest.mark.asyncio
    async def test_reduce_refuses_more_than_available(self) -> None:
        course = await create_course(total_seats=3, available_seats=1)

        async with SqlAlchemyUnitOfWork() as uow:
            assert await uow.seat_ledger.reduce(course_id=course.id, n=2) is False
            await uow.commit()

        assert await available_seats(course.id) == 1

    @pytest.mark.asyncio
    async def test_reduce_on_empty_course(self) -> None:
        course = await create_course(total_seats=2, available_seats=0)

        async with SqlAlchemyUnitOfWork() as uow:
            assert await uow.seat_ledger.reduce(course_id=course.id, n=1) is False

        assert await available_seats(course.id) == 0

    @pytest.mark.asyncio
    async def test_reduce_on_missing_course(self) -> None:
        async with SqlAlchemyUnitOfWork() as uow:
            assert await uow.seat_ledger.reduce(course_id=NONEXISTENT_COURSE_ID, n=1) is False

    @pytest.mark.asyncio
    async def test_increase_is_clamped_at_total(self) -> None:
        course = await create_course(total_seats=5, available_seats=4)

        async with SqlAlchemyUnitOfWork() as uow:
            assert await uow.seat_ledger.increase(course_id=course.id, n=3) is True
            await uow.commit()

        assert await available_seats(course.id) == 5

    @pytest.mark.asyncio
    async def test_increase_within_capacity(self) -> None:
        course = await create_course(total_seats=5, available_seats=1)

        async with SqlAlchemyUnitOfWork() as uow:
            assert await uow.seat_ledger.increase(course_id=course.id, n=2) is True
            await uow.commit()

        assert await available_seats(course.id) == 3

    @pytest.mark.asyncio
    async def test_increase_on_missing_course(self) -> None:
        async with SqlAlchemyUnitOfWork() as uow:
            assert await uow.seat_ledger.increase(course_id=NONEXISTENT_COURSE_ID, n=1) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize('n', [0, -1])
    async def test_amount_must_be_positive(self, n: int) -> None:
        course = await create_course(total_seats=5)

        async with SqlAlchemyUnitOfWork() as uow:
            with pytest.raises(ValueError):
                await uow.seat_ledger.reduce(course_id=course.id, n=n)
            with pytest.raises(ValueError):
                await uow.seat_ledger.increase(course_id=course.id, n=n)

        assert await available_seats(course.id) == 5

    @pytest.mark.asyncio
    async def test_uncommitted_reduce_is_rolled_back(self) -> None:
        course = await create_course(total_seats=2)

        async with SqlAlchemyUnitOfWork() as uow:
            assert await uow.seat_ledger.reduce(course_id=course.id, n=1) is True

        assert await available_seats(course.id) == 2
