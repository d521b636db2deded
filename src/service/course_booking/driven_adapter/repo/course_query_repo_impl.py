from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_course_query_repo import ICourseQueryRepo
from src.service.course_booking.domain.entity.course_entity import Course
from src.service.course_booking.driven_adapter.model.course_model import CourseModel
from src.service.course_booking.driven_adapter.repo.course_command_repo_impl import (
    course_model_to_entity,
)


class CourseQueryRepoImpl(ICourseQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    @Logger.io
    async def get_by_id(self, *, course_id: int) -> Course | None:
        async with self._get_session() as session:
            result = await session.execute(select(CourseModel).where(CourseModel.id == course_id))
            db_course = result.scalar_one_or_none()
            return course_model_to_entity(db_course) if db_course else None

    @Logger.io(truncate_content=True)  # type: ignore
    async def list_all(self) -> List[Course]:
        async with self._get_session() as session:
            result = await session.execute(select(CourseModel).order_by(CourseModel.id))
            return [course_model_to_entity(db_course) for db_course in result.scalars().all()]
