from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


if TYPE_CHECKING:
    from src.service.course_booking.driven_adapter.model.course_model import CourseModel
    from src.service.course_booking.driven_adapter.model.user_model import UserModel


class BookingModel(Base):
    __tablename__ = 'booking'
    # Lookup index only: one-booking-per-user-per-course is enforced by the use case
    __table_args__ = (Index('ix_booking_user_id_course_id', 'user_id', 'course_id'),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    course_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    user: Mapped[Optional['UserModel']] = relationship(
        'UserModel',
        primaryjoin='foreign(BookingModel.user_id) == UserModel.id',
        viewonly=True,
        lazy='raise',
    )
    course: Mapped[Optional['CourseModel']] = relationship(
        'CourseModel',
        primaryjoin='foreign(BookingModel.course_id) == CourseModel.id',
        viewonly=True,
        lazy='raise',
    )
