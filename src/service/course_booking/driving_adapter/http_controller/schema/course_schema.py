from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CourseCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'title': 'Python for Beginners',
                'description': 'Learn the basics of Python programming.',
                'level': 'Beginner',
                'category': 'Programming',
                'total_seats': 30,
                'duration': '6 weeks',
                'rating': 4.5,
            }
        }
    )

    title: str = Field(..., min_length=1, max_length=255)
    description: str
    level: str = Field(..., max_length=50)
    category: str = Field(..., max_length=100)
    total_seats: int = Field(..., ge=0)
    available_seats: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, max_length=512)
    rating: Optional[float] = Field(None, ge=0, le=5)
    duration: Optional[str] = Field(None, max_length=50)


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
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
