"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.calendar.driving_adapter.http_controller.calendar_controller import (
    router as calendar_router,
)
from src.service.content.driving_adapter.http_controller.news_controller import (
    router as news_router,
)
from src.service.content.driving_adapter.http_controller.search_controller import (
    router as search_router,
)
from src.service.shop.driving_adapter.http_controller.checkout_controller import (
    router as checkout_router,
)
from src.service.ticketing.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.ticketing.driving_adapter.http_controller.match_controller import (
    router as match_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Paro FC club site API',
    service_name: str = settings.SERVICE_NAME,
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Reported by /health

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    tracing_config = TracingConfig.from_settings(settings)
    tracing_config.instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(booking_router, prefix='/api/bookings', tags=['booking'])
    app.include_router(checkout_router, prefix='/api/checkout', tags=['shop'])
    app.include_router(match_router, prefix='/api/matches', tags=['match'])
    app.include_router(calendar_router, prefix='/api', tags=['calendar'])
    app.include_router(news_router, prefix='/api/news', tags=['content'])
    app.include_router(search_router, prefix='/api/search', tags=['content'])

    _register_common_endpoints(app, service_name=service_name)

    return app


def _register_common_endpoints(app: FastAPI, *, service_name: str) -> None:
    """Register health and metrics endpoints."""

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': service_name}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
