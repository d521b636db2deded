from typing import Any, Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_booking_query_repo import IBookingQueryRepo


class ListBookingsUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo):
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_all_bookings(self) -> List[Dict[str, Any]]:
        return await self.booking_query_repo.list_all_with_details()

    @Logger.io
    async def list_user_bookings(self, *, user_id: int) -> List[Dict[str, Any]]:
        return await self.booking_query_repo.list_by_user_with_details(user_id=user_id)

    @Logger.io
    async def list_course_bookings(self, *, course_id: int) -> List[Dict[str, Any]]:
        return await self.booking_query_repo.list_by_course_with_details(course_id=course_id)
