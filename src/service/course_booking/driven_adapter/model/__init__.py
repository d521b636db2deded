from src.service.course_booking.driven_adapter.model.booking_model import BookingModel
from src.service.course_booking.driven_adapter.model.course_model import CourseModel
from src.service.course_booking.driven_adapter.model.user_model import UserModel


__all__ = ['BookingModel', 'CourseModel', 'UserModel']
