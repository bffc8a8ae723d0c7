from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import datetime
import uvicorn
from . import __version__
from .config import get_settings
from .core.errors import TweetServiceError
from .routes.tweet_routes import router as tweet_router
from .utils.logger import get_logger

# Initialize settings and logger
settings = get_settings()
logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info(f"Server running on port {settings.PORT}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.debug(f"Upload directory: {settings.UPLOAD_DIR}")
    logger.debug(f"Allowed Origins: {settings.cors_origins}")

    yield

    logger.info("Shutting down Tweet Service")

app = FastAPI(
    title="Tweet Service",
    description="Publishes tweets with optional media using caller-supplied credentials",
    version=__version__,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600,
)

app.include_router(tweet_router, tags=["tweets"])

@app.get("/")
async def root():
    """Root endpoint to verify service is running."""
    return {
        "message": "Tweet Service is running",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.utcnow().isoformat()
    }

@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.utcnow().isoformat()
    }

# Error handlers
@app.exception_handler(TweetServiceError)
async def tweet_service_exception_handler(request: Request, exc: TweetServiceError):
    """Render validation and platform errors as JSON bodies."""
    logger.error(f"Tweet request failed ({exc.status_code}): {exc.message} {exc.details or ''}".rstrip())
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render malformed form fields as a client input error."""
    fields = [".".join(str(part) for part in error.get("loc", ())[1:]) for error in exc.errors()]
    fields = [field for field in fields if field]
    message = f"Invalid form field: {', '.join(fields)}" if fields else "Invalid request"
    logger.error(f"Rejecting malformed tweet request: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": message}
    )

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions."""
    logger.error(f"Unhandled error occurred: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )

# Run the application
if __name__ == "__main__":
    log_config = uvicorn.config.LOGGING_CONFIG
    log_config["formatters"]["access"]["fmt"] = settings.LOG_FORMAT

    uvicorn.run(
        "tweet_service.main:app",
        host=settings.SERVER_HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        workers=None if settings.ENVIRONMENT == "development" else settings.WORKERS,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=log_config
    )
