from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.command.create_course_use_case import CreateCourseUseCase
from src.service.course_booking.app.query.get_course_use_case import GetCourseUseCase
from src.service.course_booking.app.query.list_courses_use_case import ListCoursesUseCase
from src.service.course_booking.domain.entity.user_entity import UserEntity
from src.service.course_booking.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
)
from src.service.course_booking.driving_adapter.http_controller.schema.common_schema import (
    ApiResponse,
)
from src.service.course_booking.driving_adapter.http_controller.schema.course_schema import (
    CourseCreateRequest,
    CourseResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_courses(
    use_case: ListCoursesUseCase = Depends(ListCoursesUseCase.depends),
) -> ApiResponse[list[CourseResponse]]:
    courses = await use_case.list_courses()
    return ApiResponse.ok(
        [CourseResponse.model_validate(course) for course in courses],
        'Courses retrieved successfully',
    )


@router.get('/{course_id}')
@Logger.io
async def get_course(
    course_id: int,
    use_case: GetCourseUseCase = Depends(GetCourseUseCase.depends),
) -> ApiResponse[CourseResponse]:
    course = await use_case.get_course(course_id=course_id)
    return ApiResponse.ok(CourseResponse.model_validate(course), 'Course retrieved successfully')


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_course(
    request: CourseCreateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: CreateCourseUseCase = Depends(CreateCourseUseCase.depends),
) -> ApiResponse[CourseResponse]:
    course = await use_case.create_course(**request.model_dump())
    return ApiResponse.ok(CourseResponse.model_validate(course), 'Course created successfully')
