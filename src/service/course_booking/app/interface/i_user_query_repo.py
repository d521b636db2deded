from abc import ABC, abstractmethod

from src.service.course_booking.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: int) -> UserEntity | None:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> UserEntity | None:
        pass

    @abstractmethod
    async def verify_password(self, email: str, plain_password: str) -> UserEntity | None:
        """Return the user when the password matches, otherwise None"""
        pass
