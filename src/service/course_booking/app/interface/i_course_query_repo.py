from abc import ABC, abstractmethod
from typing import List

from src.service.course_booking.domain.entity.course_entity import Course


class ICourseQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, course_id: int) -> Course | None:
        pass

    @abstractmethod
    async def list_all(self) -> List[Course]:
        pass
