from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_course_query_repo import ICourseQueryRepo
from src.service.course_booking.domain.entity.course_entity import Course


class GetCourseUseCase:
    def __init__(self, course_query_repo: ICourseQueryRepo):
        self.course_query_repo = course_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        course_query_repo: ICourseQueryRepo = Depends(Provide[Container.course_query_repo]),
    ) -> Self:
        return cls(course_query_repo=course_query_repo)

    @Logger.io
    async def get_course(self, *, course_id: int) -> Course:
        course = await self.course_query_repo.get_by_id(course_id=course_id)
        if not course:
            raise NotFoundError('Course not found')
        return course
