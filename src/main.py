"""
Production FastAPI Application

Cinema reservation service: authentication, catalog management and the
seat reservation ledger.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.cinema.app.command.user_command_use_case import UserCommandUseCase
import src.service.cinema.driven_adapter.model  # noqa: F401  # registers ORM models


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Cinema Service] Starting up...')

    tracing = TracingConfig(service_name='cinema-service')
    tracing.setup()
    Logger.base.info('📊 [Cinema Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Cinema Service] Dependency injection wired')

    database = container.database()
    tracing.instrument_sqlalchemy(engine=database.engine)
    Logger.base.info('🗄️  [Cinema Service] Database engine ready + instrumented')

    if settings.SEED_ADMIN_ON_STARTUP:
        user_use_case = UserCommandUseCase(
            user_command_repo=container.user_command_repo(),
            user_query_repo=container.user_query_repo(),
            password_hasher=container.password_hasher(),
        )
        await user_use_case.ensure_admin(
            username=settings.ADMIN_USERNAME, password=settings.ADMIN_PASSWORD
        )

    Logger.base.info('✅ [Cinema Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Cinema Service] Shutting down...')

    await database.dispose()
    Logger.base.info('🗄️  [Cinema Service] Database engine disposed')

    tracing.shutdown()
    Logger.base.info('📊 [Cinema Service] Tracing shutdown complete')

    container.unwire()

    Logger.base.info('👋 [Cinema Service] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Cinema Reservation Service - authentication, catalog and seat reservations',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
