# sales_dashboard/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from loguru import logger

from .config.setting import settings, validate_settings
from .config.database import db_connection
from .config.logging_config import setup_logging
from .api.routes import health, transactions
from .models.errors import InvalidParameter, UpstreamFailure
from .utilities.helpers.data_formatters import format_error_response

setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info("Starting Retail Sales Dashboard API...")

    try:
        validate_settings()
        logger.info("Configuration validated successfully")
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise

    if not db_connection.connect():
        logger.error("Failed to connect to MongoDB")
        raise RuntimeError("Database connection failed")

    if settings.ENSURE_INDEXES:
        db_connection.ensure_indexes()

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down Retail Sales Dashboard API...")
    db_connection.disconnect()
    logger.info("Application shutdown complete")

# Create FastAPI application
app = FastAPI(
    **settings.set_backend_app_attributes,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request line"""
    logger.info(f"{request.method} {request.url.path}{'?' + request.url.query if request.url.query else ''}")
    return await call_next(request)

# Error handlers
@app.exception_handler(InvalidParameter)
async def invalid_parameter_handler(request: Request, exc: InvalidParameter):
    logger.warning(f"Rejected {request.url.path}: {exc}")
    return format_error_response(
        f"Invalid value for '{exc.parameter}'",
        exc.message,
        status_code=400,
        parameter=exc.parameter
    )

@app.exception_handler(UpstreamFailure)
async def upstream_failure_handler(request: Request, exc: UpstreamFailure):
    logger.error(f"Storage failure on {request.url.path}: {exc}")
    return format_error_response("Database operation failed", exc.message)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return format_error_response("Endpoint not found", status_code=404)
    return format_error_response(str(exc.detail), status_code=exc.status_code)

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return format_error_response("Internal server error", exc if settings.DEBUG else None)

# Include routers
app.include_router(health.router, prefix=f"{settings.API_PREFIX}/health", tags=["health"])
app.include_router(transactions.router, prefix=f"{settings.API_PREFIX}/transactions", tags=["transactions"])

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Retail Sales Dashboard API",
        "version": settings.API_VERSION,
        "status": "running",
        "debug_mode": settings.DEBUG,
        "endpoints": {
            "transactions": f"{settings.API_PREFIX}/transactions",
            "filters": f"{settings.API_PREFIX}/transactions/filters",
            "export": f"{settings.API_PREFIX}/transactions/export",
            "stats": f"{settings.API_PREFIX}/transactions/stats",
            "health": f"{settings.API_PREFIX}/health"
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sales_dashboard.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG
    )
