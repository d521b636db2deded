from prometheus_client import Counter, Histogram


class BookingMetrics:
    """Booking lifecycle metrics exposed at /metrics"""

    def __init__(self):
        # ========== Booking Lifecycle ==========
        self.bookings_created = Counter(
            'course_bookings_created_total',
            'Bookings committed',
            ['course_id'],
        )

        self.bookings_cancelled = Counter(
            'course_bookings_cancelled_total',
            'Bookings cancelled by their owner',
            ['course_id'],
        )

        self.bookings_rejected = Counter(
            'course_bookings_rejected_total',
            'Booking attempts refused by the booking rules',
            ['reason'],  # reason: course_not_found/no_seats/duplicate/lost_race
        )

        # ========== Seat Ledger ==========
        self.seat_ledger_operations = Counter(
            'seat_ledger_operations_total',
            'Seat ledger updates',
            ['operation', 'result'],  # operation: reduce/increase
        )

        self.create_booking_duration = Histogram(
            'create_booking_duration_seconds',
            'Create booking transaction duration',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
        )

    def record_booking_created(self, *, course_id: int):
        self.bookings_created.labels(course_id=str(course_id)).inc()

    def record_booking_cancelled(self, *, course_id: int):
        self.bookings_cancelled.labels(course_id=str(course_id)).inc()

    def record_booking_rejected(self, *, reason: str):
        self.bookings_rejected.labels(reason=reason).inc()

    def record_seat_ledger_operation(self, *, operation: str, success: bool):
        self.seat_ledger_operations.labels(
            operation=operation, result='success' if success else 'failure'
        ).inc()


metrics = BookingMetrics()
