import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from redis.asyncio import Redis

from .config import Settings
from .contracts.notifications import IPasswordResetNotifier
from .core.errors import register_exception_handlers
from .core.logger import configure_logging, logger
from .core.redis_client import create_redis_client
from .database import build_engine, build_session_factory, create_tables
from .routes import (
    analytics_router,
    auth_router,
    entries_router,
    health_router,
    projects_router,
    upload_router,
    users_router,
)
from .services.notification_service import LoggingPasswordResetNotifier
from .services.upload_service import UploadStorage


def create_app(
    settings: Optional[Settings] = None,
    redis: Optional[Redis] = None,
    notifier: Optional[IPasswordResetNotifier] = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    engine = build_engine(settings)
    owns_redis = redis is None
    if owns_redis:
        redis = create_redis_client(settings.REDIS_URL)

    upload_storage = UploadStorage(settings.UPLOAD_DIR)
    upload_storage.prepare()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.CREATE_TABLES:
            await create_tables(engine)
        logger.info("Application started successfully")
        yield
        logger.info("Application shutting down")
        if owns_redis and redis is not None:
            await redis.aclose()
        await engine.dispose()

    app = FastAPI(title="Folio API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.redis = redis
    app.state.notifier = notifier or LoggingPasswordResetNotifier()
    app.state.upload_storage = upload_storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(f"{request.method} {request.url.path} {status_code} {elapsed_ms:.1f}ms")

    register_exception_handlers(app, debug=settings.DEBUG)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(projects_router)
    app.include_router(entries_router)
    app.include_router(analytics_router)
    app.include_router(upload_router)

    app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
    return app


def run() -> None:
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
