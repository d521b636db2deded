"""
Course Booking API - FastAPI application

    uvicorn src.main:app --reload
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Course Booking] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Course Booking] Dependency injection wired')

    # PostgreSQL schema comes from alembic; SQLite (local runs) is created on the fly
    if settings.DATABASE_URL_ASYNC.startswith('sqlite'):
        await create_db_and_tables()
        Logger.base.info('🗄️  [Course Booking] SQLite tables ensured')

    Logger.base.info('✅ [Course Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Course Booking] Shutting down...')
    await dispose_engine()
    container.unwire()
    Logger.base.info('👋 [Course Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
