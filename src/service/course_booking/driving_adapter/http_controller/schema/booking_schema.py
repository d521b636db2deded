from typing import Optional

from pydantic import BaseModel, Field


class BookingCreateRequest(BaseModel):
    course_id: int = Field(..., ge=1)


class BookingUserSummary(BaseModel):
    id: int
    name: str
    email: str


class BookingCourseSummary(BaseModel):
    id: int
    title: str
    description: str
    level: str
    duration: Optional[str] = None
    rating: Optional[float] = None
    image_url: Optional[str] = None
    available_seats: int
    total_seats: int


class BookingDetailResponse(BaseModel):
    """Booking with its user and course; dates use 'YYYY-MM-DD HH:MM:SS'"""

    id: int
    user: Optional[BookingUserSummary] = None
    course: Optional[BookingCourseSummary] = None
    booking_date: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class BookingStatusResponse(BaseModel):
    course_id: int
    booked: bool
