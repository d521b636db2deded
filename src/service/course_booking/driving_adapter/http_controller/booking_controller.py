from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from opentelemetry import trace

from src.platform.exception.exception_handlers import error_envelope
from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.course_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.course_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.course_booking.app.query.has_user_booked_course_use_case import (
    HasUserBookedCourseUseCase,
)
from src.service.course_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.course_booking.domain.entity.user_entity import UserEntity
from src.service.course_booking.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    get_current_user_id,
    require_admin,
)
from src.service.course_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingDetailResponse,
    BookingStatusResponse,
)
from src.service.course_booking.driving_adapter.http_controller.schema.common_schema import (
    ApiResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _booking_not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content=error_envelope('Booking not found')
    )


@router.get('')
@Logger.io
async def list_bookings(
    current_user: UserEntity = Depends(require_admin),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> ApiResponse[list[BookingDetailResponse]]:
    bookings = await use_case.list_all_bookings()
    return ApiResponse.ok(_to_details(bookings), 'Bookings retrieved successfully')


@router.get('/my_booking')
@Logger.io
async def list_my_bookings(
    user_id: int = Depends(get_current_user_id),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> ApiResponse[list[BookingDetailResponse]]:
    bookings = await use_case.list_user_bookings(user_id=user_id)
    return ApiResponse.ok(_to_details(bookings), 'Bookings retrieved successfully')


@router.get('/course/{course_id}')
@Logger.io
async def list_course_bookings(
    course_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> ApiResponse[list[BookingDetailResponse]]:
    bookings = await use_case.list_course_bookings(course_id=course_id)
    return ApiResponse.ok(_to_details(bookings), 'Bookings retrieved successfully')


@router.get('/course/{course_id}/status')
@Logger.io
async def get_course_booking_status(
    course_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: HasUserBookedCourseUseCase = Depends(HasUserBookedCourseUseCase.depends),
) -> ApiResponse[BookingStatusResponse]:
    booked = await use_case.has_user_booked_course(
        course_id=course_id, user_id=user_id
    )
    return ApiResponse.ok(
        BookingStatusResponse(course_id=course_id, booked=booked),
        'Booking status retrieved successfully',
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    user_id: int = Depends(get_current_user_id),
    booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
    get_use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> ApiResponse[BookingDetailResponse]:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('course_id', request.course_id)
        span.set_attribute('user_id', user_id)

        booking = await booking_use_case.create_booking(
            course_id=request.course_id, user_id=user_id
        )
        if booking.id is None:
            raise ValueError('Booking ID should not be None after creation.')

        span.set_attribute('booking.id', booking.id)

        details = await get_use_case.get_booking(booking_id=booking.id)
        return ApiResponse.ok(
            BookingDetailResponse.model_validate(details), 'Course booked successfully'
        )


@router.get('/{booking_id}', response_model=None)
@Logger.io
async def get_booking(
    booking_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> ApiResponse[BookingDetailResponse] | JSONResponse:
    details = await use_case.get_booking(booking_id=booking_id)
    if details is None:
        return _booking_not_found()
    return ApiResponse.ok(
        BookingDetailResponse.model_validate(details), 'Booking retrieved successfully'
    )


@router.put('/{booking_id}', status_code=status.HTTP_405_METHOD_NOT_ALLOWED)
@Logger.io
async def update_booking(
    booking_id: int,
    current_user: UserEntity = Depends(get_current_user),
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content=error_envelope('Update method is not allowed for bookings'),
    )


@router.delete('/{booking_id}', response_model=None)
@Logger.io
async def cancel_booking(
    booking_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> ApiResponse[None] | JSONResponse:
    cancelled = await use_case.cancel_booking(booking_id=booking_id, user_id=user_id)
    if not cancelled:
        return _booking_not_found()
    return ApiResponse.ok(None, 'Booking cancelled successfully')


def _to_details(bookings: list[dict[str, Any]]) -> list[BookingDetailResponse]:
    return [BookingDetailResponse.model_validate(booking) for booking in bookings]
