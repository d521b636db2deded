from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger


@attrs.frozen
class Course:
    """
    Course record with its seat counts.

    Frozen on purpose: seat counts change only through the seat ledger,
    which updates the row in place; callers re-read to see new values.
    """

    id: Optional[int]
    title: str
    description: str
    level: str
    category: str
    total_seats: int
    available_seats: int
    image_url: Optional[str] = None
    rating: Optional[float] = None
    duration: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        title: str,
        description: str,
        level: str,
        category: str,
        total_seats: int,
        available_seats: Optional[int] = None,
        image_url: Optional[str] = None,
        rating: Optional[float] = None,
        duration: Optional[str] = None,
    ) -> 'Course':
        if not title.strip():
            raise DomainError('Course title is required')
        if total_seats < 0:
            raise DomainError('total_seats must be zero or greater')

        if available_seats is None:
            available_seats = total_seats
        elif not 0 <= available_seats <= total_seats:
            raise DomainError('available_seats must be between 0 and total_seats')

        if rating is not None and not 0 <= rating <= 5:
            raise DomainError('rating must be between 0 and 5')

        return cls(
            id=None,
            title=title,
            description=description,
            level=level,
            category=category,
            total_seats=total_seats,
            available_seats=available_seats,
            image_url=image_url,
            rating=rating,
            duration=duration,
        )

    @property
    def has_available_seats(self) -> bool:
        return self.available_seats > 0
