from fastapi import Depends
from opentelemetry import trace

from src.platform.exception.exceptions import AuthenticationError, ForbiddenError
from src.service.course_booking.domain.entity.user_entity import UserEntity
from src.service.course_booking.driving_adapter.http_controller.user_controller import (
    get_current_user as get_user_from_controller,
)


async def get_current_user(
    current_user: UserEntity = Depends(get_user_from_controller),
) -> UserEntity:
    return current_user


async def get_current_user_id(
    current_user: UserEntity = Depends(get_user_from_controller),
) -> int:
    if current_user.id is None:
        raise AuthenticationError('Invalid token')
    return current_user.id


async def require_admin(current_user: UserEntity = Depends(get_user_from_controller)) -> UserEntity:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={
            'user.id': current_user.id or 0,
            'user.role': current_user.role.value,
        },
    ):
        if not current_user.is_admin:
            raise ForbiddenError('Only admins can perform this action')
        return current_user
