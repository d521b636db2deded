from unittest.mock import AsyncMock

from src.platform.database.unit_of_work import AbstractUnitOfWork


class FakeUnitOfWork(AbstractUnitOfWork):
    """In-memory unit of work: repositories are AsyncMocks, commit only flips a flag."""

    def __init__(self) -> None:
        self.course_command_repo = AsyncMock()
        self.seat_ledger = AsyncMock()
        self.booking_command_repo = AsyncMock()
        self.committed = False
        self.rollback_count = 0

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rollback_count += 1
