import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy.orm import sessionmaker

from dailywage.core.config import DEFAULT_SECRET_KEY, settings
from dailywage.core.database import check_connection, create_db_engine, create_session_factory, init_db
from dailywage.core.exceptions import AppError, PersistenceError, describe_validation_errors
from dailywage.core.logging_config import setup_logging
from dailywage.api.endpoints import auth, provider, seeker, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Builds the engine and session factory unless one was injected,
    then verifies the database is reachable before serving requests.
    """
    logger.info("Starting up Daily Wage Jobs API...")

    if settings.SECRET_KEY == DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is not configured; tokens are signed with the public default key")

    owned_engine = None
    if app.state.session_factory is None:
        owned_engine = create_db_engine()
        app.state.session_factory = create_session_factory(owned_engine)

    engine = app.state.session_factory.kw["bind"]
    init_db(engine)
    try:
        check_connection(engine)
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        raise
    logger.info("Database connected successfully")

    yield

    logger.info("Shutting down Daily Wage Jobs API...")
    if owned_engine is not None:
        owned_engine.dispose()


def register_exception_handlers(app: FastAPI) -> None:
    """Map the application error taxonomy onto JSON responses."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if isinstance(exc, PersistenceError):
            # Internal detail stays in the logs
            return JSONResponse(status_code=exc.status_code, content={"detail": "Server error"})
        if exc.status_code == 400:
            logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = describe_validation_errors(exc.errors())
        logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"detail": message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": "Server error"})


def create_app(session_factory: Optional[sessionmaker] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        session_factory: Optional pre-built session factory (tests pass one
            bound to their own engine). When omitted, an engine for
            settings.DATABASE_URL is created at startup.
    """
    setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Daily-wage job matching API for providers and seekers",
        lifespan=lifespan
    )
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router, prefix=settings.API_PREFIX)
    app.include_router(provider.router, prefix=settings.API_PREFIX)
    app.include_router(seeker.router, prefix=settings.API_PREFIX)
    app.include_router(health.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
