"""
Production FastAPI Application

Serves the booking, checkout, match, calendar and content APIs of the club site.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import close_resources, container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Site API] Starting up...')

    tracing = TracingConfig.from_settings(settings)
    tracing.setup()
    tracing.instrument_httpx()
    if tracing.exporting:
        Logger.base.info('📊 [Site API] OpenTelemetry span export enabled')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Site API] Dependency injection wired')

    config = container.config_service()
    if not config.has_sanity_write_token:
        Logger.base.warning('⚠️ [Site API] SANITY_API_TOKEN not set, bookings will be rejected')
    if not config.has_resend_api_key:
        Logger.base.warning('⚠️ [Site API] RESEND_API_KEY not set, emails are only logged')

    Logger.base.info('✅ [Site API] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Site API] Shutting down...')

    try:
        await close_resources()
        Logger.base.info('🔌 [Site API] HTTP clients closed')
    except Exception as e:
        Logger.base.error(f'❌ [Site API] Failed to close HTTP clients: {e}')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Site API] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
