"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from line_relay.apps.api.middleware import CorrelationIdMiddleware
from line_relay.core.config import config
from line_relay.core.logging import get_logger
from line_relay.services import ServiceContainer

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration gaps at startup; none of them are fatal."""
    logger.info("Initializing line relay...")
    if not config.LINE_CHANNEL_ACCESS_TOKEN:
        logger.warning("LINE_CHANNEL_ACCESS_TOKEN is not set; replies will fail.")
    if not config.CHAT_BACKEND_BASE_URL:
        logger.warning("CHAT_BACKEND_BASE_URL is not set; chat forwarding will fail.")
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        logger.info("last command initialized at %s.", services.store.read().timestamp)
    yield
    logger.info("line relay shutting down.")


async def _not_found(_: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods both surface as a generic 404.
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(lifespan=lifespan)
    app.state.services = services
    app.add_middleware(CorrelationIdMiddleware)
    app.add_exception_handler(StarletteHTTPException, _not_found)

    from .routes import commands, health, poll, webhooks  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(commands.router)
    app.include_router(poll.router)
    app.include_router(webhooks.router)
    return app


__all__ = ["create_app", "lifespan"]
