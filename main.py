"""
Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from services.errors import RelayError, ValidationError
from routes import relay_router, resolve_router, health_router, app_router

# Configure logging
handlers = [logging.StreamHandler()]
if config.LOG_TO_FILE:
    try:
        handlers.append(logging.FileHandler(config.LOG_FILE_NAME))
    except IOError as e:
        print(f"⚠️  Could not create log file: {e}")

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper()),
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=handlers
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting TikTok Download Link Relay (upstream: {config.UPSTREAM_URL})")
    yield
    logger.info("Shutting down API")


app = FastAPI(
    title="TikTok Download Link Relay",
    description="Relay video URLs to a conversion service and extract download links",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(app_router)
app.include_router(relay_router)
app.include_router(resolve_router)
app.include_router(health_router)


# Error handlers
@app.exception_handler(RelayError)
async def relay_exception_handler(request: Request, exc: RelayError):
    """Render relay and extraction failures with their public message."""
    logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report unreadable request bodies the same way as a missing URL."""
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return await relay_exception_handler(request, ValidationError())


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """General exception handler."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )


if __name__ == "__main__":
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description='TikTok Download Link Relay API')
    parser.add_argument('--host', default=config.HOST, help='Host to bind to')
    parser.add_argument('--port', type=int, default=config.PORT, help='Port to bind to')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--log-level', default=config.LOG_LEVEL, choices=['debug', 'info', 'warning', 'error'], help='Log level')

    args = parser.parse_args()

    # Update config from args
    config.HOST = args.host
    config.PORT = args.port
    config.RELOAD = args.reload or config.RELOAD
    config.LOG_LEVEL = args.log_level

    print(f"🚀 Starting TikTok Download Link Relay")
    print(f"📍 Host: {config.HOST}")
    print(f"🔌 Port: {config.PORT}")
    print(f"🔄 Reload: {config.RELOAD}")
    print(f"📝 Log Level: {config.LOG_LEVEL}")
    print(f"🌐 API Documentation: http://{config.HOST}:{config.PORT}/docs")
    print(f"❤️  Health Check: http://{config.HOST}:{config.PORT}/health")

    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
        log_level=config.LOG_LEVEL
    )
