"""FastAPI application for the Taskboard service."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.errors import register_exception_handlers
from taskboard.api.v1 import router as api_router
from taskboard.config import settings
from taskboard.database import migrate_db
from taskboard.logging_setup import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    migrate_db()
    logger.info("%s %s ready", settings.APP_NAME, settings.APP_VERSION)
    yield


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, debug=settings.DEBUG, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health", include_in_schema=False)
    def health():
        return {"status": "ok"}

    return app


app = create_app()
