"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.config import Settings, settings as default_settings
from app.domain.models.base import TransportError
from app.domain.services.mail_transport import MailTransport
from app.infrastructure.email import EmailTemplateLoader, SMTPMailTransport
from app.infrastructure.rate_limiting import RateLimit, RateLimiter, RateLimitMiddleware
from app.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    http_exception_handler,
)
from app.infrastructure.web.routers import health, notifications

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def verify_mail_transport(transport: MailTransport) -> bool:
    """Check the transport once at startup; problems are reported, never fatal."""
    try:
        await run_in_threadpool(transport.verify)
    except TransportError as e:
        logger.error(f"Email configuration error: {e.message}")
        logger.error(
            "Please check your .env file and ensure: "
            "1. EMAIL_USER is set to your Gmail address; "
            "2. EMAIL_APP_PASSWORD is set to your Gmail App Password "
            "(https://support.google.com/accounts/answer/185833)"
        )
        return False

    logger.info("Email server is ready to send messages")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    # Startup
    app_settings: Settings = app.state.settings
    base_url = f"http://localhost:{app_settings.port}"
    logger.info(f"Starting {app_settings.service_name} v{app_settings.api_version}")
    logger.info(f"Environment: {app_settings.environment}")
    logger.info(f"Health check: {base_url}/health")
    logger.info(f"Test email: {base_url}/test")
    logger.info(f"Email endpoint: {base_url}/send-confirmation")

    if app_settings.verify_transport_on_startup:
        await verify_mail_transport(app.state.mail_transport)

    yield

    # Shutdown
    logger.info("Shutting down application")


def create_application(
    settings: Optional[Settings] = None,
    transport: Optional[MailTransport] = None,
    rate_limiter: Optional[RateLimiter] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The mail transport is built once here and shared by every request;
    pass one in to substitute a different delivery mechanism.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.service_name,
        version=settings.api_version,
        debug=settings.debug,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.mail_transport = transport or SMTPMailTransport.from_settings(settings)
    app.state.template_loader = EmailTemplateLoader(
        business_name=settings.email_from_name,
        support_email=settings.support_email
    )

    # Rate limiting for the sending endpoints
    if settings.rate_limit_enabled:
        app.add_middleware(
            RateLimitMiddleware,
            rate_limit=RateLimit(
                requests=settings.rate_limit_requests,
                window=settings.rate_limit_period
            ),
            paths=settings.rate_limit_paths,
            limiter=rate_limiter or RateLimiter(settings.redis_url)
        )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware, debug=settings.debug)

    # Unknown routes
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(notifications.router, tags=["Notifications"])

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development,
        log_level="debug" if default_settings.debug else "info",
    )
