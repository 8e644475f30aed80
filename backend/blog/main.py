"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from blog.config import get_settings
from blog.infrastructure.database import Base, engine
from blog.infrastructure.logging.log_config import setup_logging
from blog.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables."""
    settings = get_settings()
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.storage_backend.lower() == "local":
        Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Signed-cookie session for the admin login; authlib also keeps OAuth state here
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.app_env == "production",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    # Locally stored uploads are served by the app itself
    if settings.storage_backend.lower() == "local":
        upload_dir = Path(settings.upload_dir)
        upload_dir.mkdir(parents=True, exist_ok=True)
        app.mount(settings.upload_url_prefix, StaticFiles(directory=upload_dir), name="uploads")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
