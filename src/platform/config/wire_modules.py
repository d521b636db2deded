"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.course_booking.app.command import (
    cancel_booking_use_case,
    create_booking_use_case,
    create_course_use_case,
    create_user_use_case,
)
from src.service.course_booking.app.query import (
    get_booking_use_case,
    get_course_use_case,
    has_user_booked_course_use_case,
    list_bookings_use_case,
    list_courses_use_case,
)
from src.service.course_booking.driving_adapter.http_controller import user_controller


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    cancel_booking_use_case,
    create_course_use_case,
    create_user_use_case,
    get_booking_use_case,
    get_course_use_case,
    has_user_booked_course_use_case,
    list_bookings_use_case,
    list_courses_use_case,
    user_controller,
]
