"""
Main application entry point.
"""
import logging
import sys

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from restaurant_staff.core.config import settings, log_config_info
from restaurant_staff.core.exceptions import AppError
from restaurant_staff.db.mongodb import mongodb
from restaurant_staff.domains.employees.service import employee_service

# Import API routers
from restaurant_staff.api.employees.router import router as employees_router
from restaurant_staff.api.health.router import router as health_router

# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(title=settings.PROJECT_NAME)

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render application errors with their status code and kind."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400 with the offending field."""
    errors = exc.errors()
    parts = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))

    first_loc = [str(part) for part in errors[0].get("loc", ()) if part != "body"] if errors else []
    content = {
        "message": "Employee validation failed: " + ", ".join(parts),
        "kind": "validation",
    }
    if first_loc:
        content["field"] = first_loc[0]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc), "kind": "store"}
    )


# Startup and shutdown events
@app.on_event("startup")
async def startup_event():
    """Event triggered on application startup."""
    log_config_info(logger)

    if not settings.MONGODB_URL:
        logger.critical("MONGODB_URL is not set; refusing to start")
        raise RuntimeError("MONGODB_URL environment variable is not set")

    mongodb.connect_to_mongodb()
    await mongodb.ensure_indexes()
    await employee_service.prepare()

    logger.info("Application started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Event triggered on application shutdown."""
    await mongodb.close_mongodb_connection()

    logger.info("Application shutdown")


# Include API routers
app.include_router(health_router, tags=["health"])
app.include_router(employees_router, prefix="/employees", tags=["employees"])
if settings.ENABLE_LEGACY_ROUTES:
    # Same routes under the old path for clients that predate the rename
    app.include_router(employees_router, prefix="/persons", tags=["persons (legacy)"])


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to {settings.PROJECT_NAME} API"}


def run():
    """Serve the API with uvicorn, exiting early when MongoDB is not configured."""
    if not settings.MONGODB_URL:
        logger.critical("MONGODB_URL is not set; refusing to start")
        sys.exit(1)

    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
