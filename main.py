import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from jobboard.core.config import settings
from jobboard.core.database import init_db
from jobboard.core.exceptions import ServiceError, STATUS_CODES
from jobboard.core.logging_config import setup_logging
from jobboard.api.endpoints import applications, companies, health, jobs
from jobboard.web import auth, pages

setup_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up Job Board API...")
    # SQLite is for local runs; PostgreSQL schemas come from Alembic
    init_db(create_tables=settings.DATABASE_URL.startswith("sqlite"))
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Job Board API...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Job board: companies post jobs, applicants search and apply",
    lifespan=lifespan
)

# Single browser origin by default (BACKEND_CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    status_code = STATUS_CODES[exc.kind]
    logger.info(f"{request.method} {request.url.path} -> {status_code} {exc.kind.value}: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "kind": exc.kind.value})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request fields are a plain 400."""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors()), "kind": "VALIDATION"})


# API routers are unauthenticated and CSRF-exempt
app.include_router(jobs.router, prefix=settings.API_PREFIX)
app.include_router(companies.router, prefix=settings.API_PREFIX)
app.include_router(applications.router, prefix=settings.API_PREFIX)
app.include_router(health.router)

# HTML pages
app.include_router(auth.router)
app.include_router(pages.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
