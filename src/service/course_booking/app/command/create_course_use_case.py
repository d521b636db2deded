from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.course_booking.domain.entity.course_entity import Course


class CreateCourseUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_course(
        self,
        *,
        title: str,
        description: str,
        level: str,
        category: str,
        total_seats: int,
        available_seats: Optional[int] = None,
        image_url: Optional[str] = None,
        rating: Optional[float] = None,
        duration: Optional[str] = None,
    ) -> Course:
        course = Course.create(
            title=title,
            description=description,
            level=level,
            category=category,
            total_seats=total_seats,
            available_seats=available_seats,
            image_url=image_url,
            rating=rating,
            duration=duration,
        )

        async with self.uow:
            created = await self.uow.course_command_repo.create(course=course)
            await self.uow.commit()

        Logger.base.info(f'📚 [CREATE-COURSE] Course {created.id} "{created.title}" created')
        return created
