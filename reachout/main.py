from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
import logging
import time
from typing import Callable
from contextlib import asynccontextmanager
from fastapi.routing import APIRoute

from reachout.core.config import settings
from reachout.core.database import db
from reachout.core.exceptions import AuthError, DataClientError
from reachout.api.v1.api import api_router

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def custom_generate_unique_id(route: APIRoute) -> str:
    tag = route.tags[0] if route.tags else "default"
    return f"{tag}-{route.name}"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect to the store before serving. Local environments get their
    tables created on startup; other environments run the scripts.
    """
    logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")
    db.init_app()

    if not await db.check_connection():
        logger.error("Store unreachable, refusing to start")
        raise RuntimeError("Database connection failed")
    logger.info("Store connection verified")

    if settings.ENVIRONMENT == "local":
        db.init_db()

    logger.info(f"Form dates are read in {settings.LOCAL_TIMEZONE}")
    logger.info(f"Operators are sent to {settings.LOGIN_PATH} after sign-out")

    try:
        yield
    finally:
        db.dispose()
        logger.info("Store connections released")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    generate_unique_id_function=custom_generate_unique_id,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=f"{settings.API_V1_STR}/docs",
    redoc_url=f"{settings.API_V1_STR}/redoc",
    lifespan=lifespan,
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next: Callable):
    """Time every request and log method, path and outcome"""
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception(f"{request.method} {request.url.path} failed after {time.time() - start_time:.4f}s")
        raise

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({process_time:.4f}s)")
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation Error",
            "errors": jsonable_encoder(exc.errors())
        }
    )


# Routes report store failures themselves; these only catch what slips past them
@app.exception_handler(DataClientError)
async def data_client_exception_handler(request: Request, exc: DataClientError):
    logger.error(f"Store error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message, "collection": exc.collection},
    )


@app.exception_handler(AuthError)
async def auth_exception_handler(request: Request, exc: AuthError):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


if settings.all_cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/", tags=["root"])
async def root():
    """API name, version and where the public and admin sections live."""
    return {
        "message": f"Welcome to the {settings.PROJECT_NAME} API",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "public": [
            f"{settings.API_V1_STR}/home",
            f"{settings.API_V1_STR}/get-involved",
            f"{settings.API_V1_STR}/resources",
            f"{settings.API_V1_STR}/events",
            f"{settings.API_V1_STR}/prayer-requests",
        ],
        "admin": f"{settings.API_V1_STR}/admin/dashboard",
        "docs": f"{settings.API_V1_STR}/docs",
    }
