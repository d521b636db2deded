from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics


class CancelBookingUseCase:
    """
    Cancel a booking and hand its seat back

    Flow (single unit of work):
    1. Load and lock the booking; a missing booking is reported as False
    2. Only the owner may cancel
    3. Delete the booking; if another cancel already removed it, report False
    4. Release the seat through the seat ledger (clamped at total_seats)
    5. Commit
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
    async def cancel_booking(self, *, booking_id: int, user_id: int) -> bool:
        with self.tracer.start_as_current_span(
            'use_case.cancel_booking',
            attributes={'booking.id': booking_id, 'user.id': user_id},
        ):
            async with self.uow:
                booking = await self.uow.booking_command_repo.get_by_id_for_update(
                    booking_id=booking_id
                )
                if not booking:
                    Logger.base.info(f'🔍 [CANCEL-BOOKING] Booking {booking_id} not found')
                    return False

                booking.validate_can_be_cancelled_by(user_id)

                deleted = await self.uow.booking_command_repo.delete(booking_id=booking_id)
                if not deleted:
                    Logger.base.info(f'🔍 [CANCEL-BOOKING] Booking {booking_id} already cancelled')
                    return False

                increased = await self.uow.seat_ledger.increase(course_id=booking.course_id, n=1)
                metrics.record_seat_ledger_operation(operation='increase', success=increased)

                await self.uow.commit()

            metrics.record_booking_cancelled(course_id=booking.course_id)
            Logger.base.info(
                f'🗑️ [CANCEL-BOOKING] Booking {booking_id} cancelled by user {user_id}, '
                f'seat released on course {booking.course_id}'
            )
            return True
