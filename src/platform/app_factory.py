"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Awaitable, Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    AUTH_BASE,
    HEALTH,
    METRICS,
    MOVIE_BASE,
    RESERVE_BASE,
    REVENUE,
    SHOWTIME_BASE,
)
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.metrics.cinema_metrics import metrics
from src.platform.observability.tracing import TracingConfig
from src.service.cinema.driving_adapter.http_controller.movie_controller import (
    router as movie_router,
)
from src.service.cinema.driving_adapter.http_controller.reservation_controller import (
    report_router,
    router as reservation_router,
)
from src.service.cinema.driving_adapter.http_controller.showtime_controller import (
    router as showtime_router,
)
from src.service.cinema.driving_adapter.http_controller.user_controller import (
    router as auth_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Cinema Reservation Service',
    service_name: str = 'cinema-service',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    tracing_config = TracingConfig(service_name=service_name)
    tracing_config.instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    @app.middleware('http')
    async def count_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        # Route template keeps label cardinality bounded
        route = request.scope.get('route')
        path = getattr(route, 'path', None) or 'unmatched'
        metrics.record_http_request(method=request.method, path=path)
        return response

    app.include_router(auth_router, prefix=AUTH_BASE, tags=['auth'])
    app.include_router(movie_router, prefix=MOVIE_BASE, tags=['movie'])
    app.include_router(showtime_router, prefix=SHOWTIME_BASE, tags=['showtime'])
    app.include_router(reservation_router, prefix=RESERVE_BASE, tags=['reservation'])
    app.include_router(report_router, prefix=REVENUE, tags=['report'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get(METRICS)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
