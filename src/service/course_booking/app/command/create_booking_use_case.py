import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.course_booking.domain.entity.booking_entity import Booking


class CreateBookingUseCase:
    """
    Book one seat of a course for a user

    Flow (single unit of work):
    1. Read the course, locking its row where the database supports it
    2. Fail fast when no seat is left
    3. Refuse a second booking of the same course by the same user
    4. Take the seat through the seat ledger (conditional UPDATE)
    5. Insert the booking
    6. Commit

    Any error before step 6 leaves the store untouched.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_booking(self, *, course_id: int, user_id: int) -> Booking:
        """
        Raises:
            NotFoundError: Course does not exist
            ConflictError: No seat left, already booked, or the last seat was taken concurrently
            TransactionFailureError: The store rejected the transaction
        """
        started = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'course.id': course_id, 'user.id': user_id},
        ):
            async with self.uow:
                # Step 1: Course lookup
                course = await self.uow.course_command_repo.get_by_id_for_update(
                    course_id=course_id
                )
                if not course:
                    metrics.record_booking_rejected(reason='course_not_found')
                    raise NotFoundError('Course not found')

                # Step 2: Fail fast on a full course
                if not course.has_available_seats:
                    metrics.record_booking_rejected(reason='no_seats')
                    raise ConflictError('No available seats for this course')

                # Step 3: One booking per user per course
                existing = await self.uow.booking_command_repo.find_by_user_and_course(
                    user_id=user_id, course_id=course_id
                )
                if existing:
                    metrics.record_booking_rejected(reason='duplicate')
                    raise ConflictError('You have already booked this course')

                # Step 4: Take the seat
                reduced = await self.uow.seat_ledger.reduce(course_id=course_id, n=1)
                metrics.record_seat_ledger_operation(operation='reduce', success=reduced)
                if not reduced:
                    metrics.record_booking_rejected(reason='lost_race')
                    raise ConflictError('Failed to book course')

                # Step 5: Persist the booking
                booking = await self.uow.booking_command_repo.create(
                    booking=Booking.create(user_id=user_id, course_id=course_id)
                )

                # Step 6: Commit
                await self.uow.commit()

            metrics.record_booking_created(course_id=course_id)
            metrics.create_booking_duration.observe(time.perf_counter() - started)
            Logger.base.info(
                f'📝 [CREATE-BOOKING] Booking {booking.id} created '
                f'for user {user_id} on course {course_id}'
            )
            return booking
