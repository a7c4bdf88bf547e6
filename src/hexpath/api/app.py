"""FastAPI application wiring for hexpath."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hexpath import __version__
from hexpath.api import routes
from hexpath.config import Settings, get_settings


def create_app(*, settings: Settings | None = None) -> FastAPI:
    """Instantiate the FastAPI application with routing and middleware."""

    settings = settings or get_settings()
    app = FastAPI(title="hexpath API", version=__version__)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(routes.router)
    return app


app = create_app()
