"""
Course Seat Ledger Interface

The only writer of course.available_seats. Both operations run inside the
caller's unit of work and never commit on their own.
"""

from abc import ABC, abstractmethod


class ICourseSeatLedger(ABC):
    @abstractmethod
    async def reduce(self, *, course_id: int, n: int) -> bool:
        """
        Take n seats from the course in one conditional update

        Args:
            course_id: Course ID
            n: Number of seats to take (>= 1)

        Returns:
            True if the seats were taken, False if the course is missing
            or has fewer than n seats left
        """
        pass

    @abstractmethod
    async def increase(self, *, course_id: int, n: int) -> bool:
        """
        Give n seats back, never exceeding total_seats

        Args:
            course_id: Course ID
            n: Number of seats to release (>= 1)

        Returns:
            True if the course exists
        """
        pass
