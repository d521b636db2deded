from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.course_booking.domain.entity.user_entity import UserEntity
from src.service.course_booking.driven_adapter.model.user_model import UserModel
from src.service.course_booking.driven_adapter.repo.user_query_repo_impl import (
    user_model_to_entity,
)


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        user_model = UserModel(
            email=user_entity.email,
            hashed_password=user_entity.hashed_password,
            name=user_entity.name,
            role=user_entity.role.value,
            is_active=user_entity.is_active,
        )

        async with self.session_factory() as session:
            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError('Email already registered') from e
            await session.refresh(user_model)

        return user_model_to_entity(user_model)
