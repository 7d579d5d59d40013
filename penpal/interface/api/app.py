"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from penpal.config import Settings
from penpal.interface.api.routes import (
    accounts,
    auth,
    contacts,
    health,
    letters,
    link,
)
from penpal.util.di.container import create_container, setup_di
from penpal.util.observability import instrument_fastapi, instrument_httpx


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="Penpal API",
        description="Backend API for Penpal - send letters to your MeWe contacts",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(accounts.router)
    app_instance.include_router(link.router)
    app_instance.include_router(contacts.router)
    app_instance.include_router(letters.router)

    return app_instance
