"""
Catering Quotes API - Main Application Entry Point
Quotes, customers and food items for a catering business.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from catering_quotes.core.config import settings
from catering_quotes.core.database import init_db, close_db
from catering_quotes.core.exceptions import AppError
from catering_quotes.core.logging import setup_logging
from catering_quotes.api.v1.router import api_router


setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} ({settings.ENVIRONMENT})")
    
    # Initialize database tables (for development)
    if settings.is_development:
        await init_db()
        logger.info("Database tables initialized")
    
    yield
    
    logger.info("Shutting down")
    await close_db()


app = FastAPI(
    title=settings.APP_NAME,
    description="""
## Catering Quotes API

Backend for a catering quote builder.

* **Customers** - who the quotes are for
* **Food items** - the catalogue with cost prices, allergens and dietary tags
* **Quotes** - line items priced with markup and VAT, margin health, status workflow
* **Settings** - default VAT, markup and margin thresholds
    """,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    openapi_url="/openapi.json" if settings.is_development else None,
    lifespan=lifespan,
)


# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


# Exception handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Translate application errors to their HTTP status."""
    logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={**exc.to_dict(), "timestamp": _timestamp()},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request validation errors as 400 with one entry per field."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body") or "body"
        errors.setdefault(field, []).append(error["msg"])
    
    logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "One or more validation errors occurred.",
            "errors": errors,
            "status_code": status.HTTP_400_BAD_REQUEST,
            "timestamp": _timestamp(),
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected errors and hide their details from the client."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "timestamp": _timestamp(),
        },
    )


# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get(
    "/health",
    tags=["Health"],
    summary="Health check",
)
async def health_check():
    """Check if the API is running."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get(
    "/",
    tags=["Info"],
    summary="API information",
)
async def root():
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.is_development else "Disabled in production",
        "health": "/health",
    }


if __name__ == "__main__":
    import os
    import uvicorn
    
    port = int(os.getenv("PORT", "8000"))
    
    uvicorn.run(
        "catering_quotes.main:app",
        host=settings.HOST,
        port=port,
        reload=settings.is_development,
    )
