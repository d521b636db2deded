from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger


@attrs.define
class Booking:
    """One seat in one course, held by one user. created_at doubles as the booking date."""

    user_id: int
    course_id: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(cls, *, user_id: int, course_id: int) -> 'Booking':
        now = datetime.now(timezone.utc)
        return cls(user_id=user_id, course_id=course_id, created_at=now, updated_at=now)

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    @Logger.io
    def validate_can_be_cancelled_by(self, user_id: int) -> None:
        """
        Only the user who made the booking may cancel it

        Raises:
            ForbiddenError: When user_id is not the booking owner
        """
        if not self.is_owned_by(user_id):
            raise ForbiddenError('Unauthorized to cancel this booking')
