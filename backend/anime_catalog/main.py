"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from anime_catalog import __version__
from anime_catalog.api import api_router
from anime_catalog.config import settings
from anime_catalog.core.exceptions import UPDATE_BODY_MESSAGE, AppException
from anime_catalog.core.logging import get_logger, setup_logging
from anime_catalog.schemas.common import HealthResponse

setup_logging(settings.log_level)
logger = get_logger("main")

BODY_MESSAGES = {"POST": "El cuerpo de la petición debe ser un animé o una lista de animés"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    # Startup
    if settings.storage_backend == "json" and not settings.anime_file.is_file():
        logger.warning(f"Anime file {settings.anime_file} does not exist yet")
    logger.info(f"Servidor escuchando en http://localhost:{settings.port}")
    yield
    # Shutdown
    logger.info("Servidor detenido")


app = FastAPI(
    title=settings.app_name,
    description="CRUD API over a JSON anime catalog",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Handle application exceptions."""
    level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(
        level,
        f"{request.method} {request.url.path} -> {exc.status_code} {exc.error_code}: "
        f"{exc.message} {exc.details}",
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request bodies that are not valid JSON of the expected shape."""
    logger.debug(f"Rejected body on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": BODY_MESSAGES.get(request.method, UPDATE_BODY_MESSAGE)},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")

    if settings.debug:
        return JSONResponse(
            status_code=500,
            content={"error": f"{type(exc).__name__}: {exc}"},
        )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


# Include API router
app.include_router(api_router)


# Health check endpoint
@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs" if settings.debug else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "anime_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
