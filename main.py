"""
Todo Service FastAPI Application

Main entry point for the todo server.
Configures FastAPI with CORS, logging, error handlers and routes.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from app.config import get_settings
from app.core.errors import TodoServiceError
from app.api.routes import health, todos, users

settings = get_settings()

logging.basicConfig(level=settings.logging.LEVEL, format=settings.logging.FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    The user store is in memory only, so there is nothing to load on
    startup or flush on shutdown.
    """
    # Startup
    logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION}")
    logger.info(f"Server ready on {settings.server.HOST}:{settings.server.PORT}")

    yield

    # Shutdown
    logger.info("Shutting down server...")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    description="Multi-user todo lists with a free and a pro plan",
    lifespan=lifespan,
    debug=settings.DEBUG,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors.ALLOW_ORIGINS),
    allow_methods=list(settings.cors.ALLOW_METHODS),
    allow_headers=list(settings.cors.ALLOW_HEADERS),
)


@app.exception_handler(TodoServiceError)
async def todo_service_error_handler(request: Request, exc: TodoServiceError) -> JSONResponse:
    """Render service errors as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies with the same ``error`` key."""
    logger.warning(f"Invalid request body for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(users.router)
app.include_router(todos.router)


@app.get("/")
async def root() -> dict:
    """
    Root endpoint.

    Returns:
        dict: Welcome message and API information.
    """
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.server.HOST, port=settings.server.PORT)
