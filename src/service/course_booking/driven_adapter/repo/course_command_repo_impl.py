from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_course_command_repo import ICourseCommandRepo
from src.service.course_booking.domain.entity.course_entity import Course
from src.service.course_booking.driven_adapter.model.course_model import CourseModel


def course_model_to_entity(db_course: CourseModel) -> Course:
    return Course(
        id=db_course.id,
        title=db_course.title,
        description=db_course.description,
        level=db_course.level,
        category=db_course.category,
        total_seats=db_course.total_seats,
        available_seats=db_course.available_seats,
        image_url=db_course.image_url,
        rating=db_course.rating,
        duration=db_course.duration,
        created_at=db_course.created_at,
        updated_at=db_course.updated_at,
    )


class CourseCommandRepoImpl(ICourseCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id_for_update(self, *, course_id: int) -> Course | None:
        # FOR UPDATE is dropped by dialects without row locks (SQLite)
        result = await self.session.execute(
            select(CourseModel)
            .where(CourseModel.id == course_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        db_course = result.scalar_one_or_none()
        if not db_course:
            return None
        return course_model_to_entity(db_course)

    @Logger.io
    async def create(self, *, course: Course) -> Course:
        db_course = CourseModel(
            title=course.title,
            description=course.description,
            level=course.level,
            category=course.category,
            total_seats=course.total_seats,
            available_seats=course.available_seats,
            image_url=course.image_url,
            rating=course.rating,
            duration=course.duration,
        )
        self.session.add(db_course)
        await self.session.flush()
        await self.session.refresh(db_course)
        return course_model_to_entity(db_course)
