from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IBookingQueryRepo(ABC):
    """Read-only booking queries with user and course details attached."""

    @abstractmethod
    async def get_by_id_with_details(self, *, booking_id: int) -> Dict[str, Any] | None:
        pass

    @abstractmethod
    async def list_all_with_details(self) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    async def list_by_user_with_details(self, *, user_id: int) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    async def list_by_course_with_details(self, *, course_id: int) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    async def exists_for_user_and_course(self, *, user_id: int, course_id: int) -> bool:
        pass
