"""
Application entry points.

Creates the two FastAPI applications and wires together:
- Routers (resource CRUD per type, or the boat aggregation endpoint)
- Error handlers (centralized error-kind-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings
from app.interfaces.aggregation.dependencies import build_aggregation_client
from app.interfaces.aggregation.router import router as aggregation_router
from app.interfaces.health import router as health_router
from app.interfaces.resources.dependencies import RESOURCE_TYPES, build_stores
from app.interfaces.resources.router import build_resource_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter


def _build_base_app(app_settings: Settings, title: str) -> FastAPI:
    """Create a FastAPI app with the cross-cutting concerns both services share."""
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=title,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )
    app.state.settings = app_settings

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(
        app_settings.rate_limit_default, enabled=app_settings.rate_limit_enabled
    )
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    app.include_router(health_router)
    return app


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create the resource service: CRUD endpoints for every resource type.

    Args:
        app_settings: Settings to use; defaults to the environment settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    app = _build_base_app(app_settings, app_settings.project_name)

    app.state.stores = build_stores(seed=app_settings.seed_data)
    for resource_name in RESOURCE_TYPES:
        app.include_router(build_resource_router(resource_name))

    return app


def create_aggregator_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create the aggregation gateway composing the boat and brand services.

    Args:
        app_settings: Settings to use; defaults to the environment settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    app = _build_base_app(app_settings, f"{app_settings.project_name} Aggregator")

    app.state.aggregation_client = build_aggregation_client(app_settings)
    app.include_router(aggregation_router)

    return app


app = create_app()
aggregator_app = create_aggregator_app()
