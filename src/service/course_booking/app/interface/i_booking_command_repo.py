"""
Booking Command Repository Interface

Used by the booking use cases inside a unit of work; never commits.
"""

from abc import ABC, abstractmethod

from src.service.course_booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def get_by_id_for_update(self, *, booking_id: int) -> Booking | None:
        """
        Get a booking and lock its row until the unit of work ends

        Returns:
            Booking entity or None if no such booking exists
        """
        pass

    @abstractmethod
    async def find_by_user_and_course(self, *, user_id: int, course_id: int) -> Booking | None:
        """
        Get the live booking of a user for a course

        Returns:
            Booking entity or None if the user has not booked the course
        """
        pass

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Insert a booking row

        Returns:
            Booking entity with its generated id
        """
        pass

    @abstractmethod
    async def delete(self, *, booking_id: int) -> bool:
        """
        Delete a booking row

        Returns:
            True if a row was deleted
        """
        pass
