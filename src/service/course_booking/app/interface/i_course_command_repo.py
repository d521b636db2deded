from abc import ABC, abstractmethod

from src.service.course_booking.domain.entity.course_entity import Course


class ICourseCommandRepo(ABC):
    """Course access inside a unit of work. Seat counts are not writable here."""

    @abstractmethod
    async def get_by_id_for_update(self, *, course_id: int) -> Course | None:
        """Read the course, locking its row until the transaction ends where supported"""
        pass

    @abstractmethod
    async def create(self, *, course: Course) -> Course:
        pass
