"""FastAPI application."""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from remark.config import Settings
from remark.interface.api.errors import register_error_handlers
from remark.interface.api.routes import comments, health
from remark.util.di.container import create_container, setup_di
from remark.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Remark API",
        description="Anonymous threaded comments with optional attachments",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    register_error_handlers(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    # Stored attachments, served as-is
    app_instance.mount(
        settings.storage.url_prefix,
        StaticFiles(directory=settings.storage.directory, check_dir=False),
        name="uploads",
    )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
