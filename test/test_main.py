"""
Test-specific FastAPI Application

Uses shared app factory for common setup; skips tracing export.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.user_command_use_case import UserCommandUseCase
import src.service.cinema.driven_adapter.model  # noqa: F401


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """
    Minimal lifespan for testing - no tracing exporter.

    Only initializes essential resources:
    - Dependency injection
    - Database tables (already migrated, ensured for direct runs)
    - Admin account
    """
    Logger.base.info('🧪 [Test App] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Test App] Dependency injection wired')

    database = container.database()
    await database.create_tables()

    user_use_case = UserCommandUseCase(
        user_command_repo=container.user_command_repo(),
        user_query_repo=container.user_query_repo(),
        password_hasher=container.password_hasher(),
    )
    await user_use_case.ensure_admin(
        username=settings.ADMIN_USERNAME, password=settings.ADMIN_PASSWORD
    )
    Logger.base.info('✅ [Test App] Startup complete')

    yield

    Logger.base.info('🛑 [Test App] Shutting down...')
    await database.dispose()
    container.unwire()
    Logger.base.info('👋 [Test App] Shutdown complete')


app = create_app(
    lifespan=lifespan_for_tests,
    title_suffix=' (Test)',
    description='Test Application',
    service_name='test-cinema-service',
)
