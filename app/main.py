from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import health, query, transcript
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.core.settings import get_settings


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(query.router)
    app.include_router(transcript.router)

    app.include_router(health.router)

    return app


app = create_app()
