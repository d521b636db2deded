from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_booking_query_repo import IBookingQueryRepo


class HasUserBookedCourseUseCase:
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
    async def has_user_booked_course(self, *, course_id: int, user_id: int) -> bool:
        return await self.booking_query_repo.exists_for_user_and_course(
            user_id=user_id, course_id=course_id
        )
