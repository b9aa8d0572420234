"""
CRUD Backend Application Entry Point

Builds the FastAPI application: store lifecycle, CORS, error rendering
and the ``/api`` routers.
"""

import logging
import traceback
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRouter

from crud_backend import __version__
from crud_backend.api import activity_logs_router, employees_router, products_router
from crud_backend.api.deps import get_employee_repo, get_product_repo
from crud_backend.common.errors import AppError, InternalServerError
from crud_backend.config import Settings, get_settings
from crud_backend.db.mongo import close_mongo, init_mongo
from crud_backend.db.redis import close_redis, init_redis
from crud_backend.db.session import close_db, init_db
from crud_backend.logging_config import setup_logging
from crud_backend.scheduler import shutdown_scheduler, start_scheduler

logger = logging.getLogger(__name__)

setup_logging()

# Repositories whose text indexes are ensured on startup
INDEXED_REPOSITORIES = (get_product_repo, get_employee_repo)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect stores on startup and release them on shutdown

    Startup order: SQL tables, MongoDB (plus text indexes), Redis when it
    backs the cache, then the scheduler. Shutdown runs in reverse.
    """
    settings = get_settings()
    use_redis = settings.CACHE_STORE_TYPE == "redis"

    await init_db()
    await init_mongo()
    for repo_factory in INDEXED_REPOSITORIES:
        await repo_factory().ensure_indexes()
    if use_redis:
        await init_redis()
    start_scheduler()
    logger.info("%s started (cache store: %s)", settings.APP_NAME, settings.CACHE_STORE_TYPE)

    yield

    shutdown_scheduler()
    if use_redis:
        await close_redis()
    await close_mongo()
    await close_db()


def parse_allowed_origins(settings: Settings) -> list[str]:
    """
    CORS origins from the comma-separated ALLOWED_ORIGINS

    Falls back to local frontends in DEBUG mode, otherwise no origins.
    """
    origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()]
    if not origins and settings.DEBUG:
        return ["http://localhost:3000", "http://127.0.0.1:3000"]
    return origins


settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    description="Generic CRUD service over MongoDB with caching, auditing and lifecycle events",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=parse_allowed_origins(settings),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """
    Render application errors with their own status code

    Details are only returned in DEBUG mode.
    """
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(include_details=get_settings().DEBUG),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Render uncaught exceptions as a generic 500"""
    stack = traceback.format_exc()
    logger.error(
        "Uncaught exception on %s %s: %s\n%s",
        request.method,
        request.url.path,
        exc,
        stack,
    )

    content: dict[str, Any] = InternalServerError().to_dict()
    if get_settings().DEBUG:
        content["error"].update(
            message=str(exc),
            type=type(exc).__name__,
            traceback=stack.split("\n"),
        )
    return JSONResponse(status_code=500, content=content)


@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness probe"""
    return {"status": "healthy"}


@app.get("/", tags=["Health"])
async def root():
    return {
        "name": settings.APP_NAME,
        "version": __version__,
        "resources": ["/api/products", "/api/employees", "/api/activity-logs"],
    }


api_router = APIRouter(prefix="/api")
api_router.include_router(products_router)
api_router.include_router(employees_router)
api_router.include_router(activity_logs_router)
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "crud_backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
