from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_course_query_repo import ICourseQueryRepo
from src.service.course_booking.domain.entity.course_entity import Course


class ListCoursesUseCase:
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
    async def list_courses(self) -> List[Course]:
        return await self.course_query_repo.list_all()
