from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


class CourseModel(Base):
    __tablename__ = 'course'
    __table_args__ = (
        CheckConstraint('total_seats >= 0', name='ck_course_total_seats_non_negative'),
        CheckConstraint(
            'available_seats >= 0 AND available_seats <= total_seats',
            name='ck_course_available_seats_in_range',
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    level: Mapped[str] = mapped_column(String(50), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    duration: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    available_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self):
        return (
            f'<CourseModel(id={self.id}, title={self.title}, '
            f'seats={self.available_seats}/{self.total_seats})>'
        )
