import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic_core import _pydantic_core
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request

from api.shared.dtos import HealthCheckResponse
from api.shared.entities.registry import BaseEntity
from core.logging_config import configure_logging
from core.settings import SETTINGS
from di.container import ApplicationContainer as DependencyContainer

configure_logging(level=SETTINGS.APP.LOG_LEVEL, json_logs=SETTINGS.APP.JSON_LOGS)

logger = structlog.get_logger("forum")


class CustomFastAPI(FastAPI):
    container: DependencyContainer


@asynccontextmanager
async def lifespan(_app: CustomFastAPI):
    logger.info("Starting application initialization...")
    start_time = time.time()

    try:
        settings = _app.container.infrastructure.settings()
        db_resource = _app.container.infrastructure.database()
        await db_resource.init()
        if settings.DATABASE.AUTO_CREATE_SCHEMA:
            await db_resource.create_schema(BaseEntity)
            logger.info("Database schema ensured")
        await db_resource.ping()
        logger.info(
            f"✅ Application startup completed in {time.time() - start_time:.2f}s"
        )
    except Exception as e:
        logger.exception(f"❌ Failed to initialize application: {str(e)}")
        raise

    yield

    db_resource = _app.container.infrastructure.database()
    await db_resource.shutdown()
    logger.info("Application shutdown complete")


def create_fastapi_app() -> CustomFastAPI:
    origins = {
        "*",
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:8000",
    }

    _app = CustomFastAPI(
        title="Forum API",
        description="Questions and replies for a minimal forum",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Initialize dependency container
    _app.container = DependencyContainer()
    _app.container.init_resources()

    _app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include feature routers
    from api.features.conversation.router import router as conversation_router

    _app.include_router(
        conversation_router,
        prefix=f"{SETTINGS.APP.API_PREFIX}/questions",
        tags=["Questions"],
    )

    return _app


app = create_fastapi_app()


# Health check endpoints
@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/ready", response_model=HealthCheckResponse)
async def ready(request: Request):
    db_resource = request.app.container.infrastructure.database()
    try:
        await db_resource.ping()
    except (SQLAlchemyError, RuntimeError) as e:
        logger.error("readiness_check_failed", error=str(e))
        return JSONResponse(
            status_code=503,
            content=HealthCheckResponse(
                status="unavailable", dependencies={"database": "error"}
            ).model_dump(mode="json"),
        )
    return HealthCheckResponse(status="ok", dependencies={"database": "ok"})


# Exception handlers
@app.exception_handler(404)
async def not_found_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=404,
        content={
            "error": "Not Found",
            "detail": f"{exc.detail} : {request.url}",
            "status_code": 404,
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"error": "Validation Error", "detail": str(exc), "status_code": 422},
    )


@app.exception_handler(_pydantic_core.ValidationError)
async def pydantic_validation_handler(
    request: Request, exc: _pydantic_core.ValidationError
):
    return JSONResponse(
        status_code=422,
        content={"error": "Validation Error", "detail": str(exc), "status_code": 422},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception", error=str(exc))
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
            "status_code": 500,
        },
    )
