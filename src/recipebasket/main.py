"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from recipebasket import __version__
from recipebasket.config import get_settings
from recipebasket.dependencies import build_store
from recipebasket.logging_config import LoggingContext, configure_logging, get_logger
from recipebasket.routers import shopping_list_router

settings = get_settings()

# Configure logging on module load
configure_logging(settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Starting Recipebasket API")

    app.state.shopping_list_store = build_store(settings)

    yield

    logger.info("Shutting down Recipebasket API")


app = FastAPI(
    title="Recipebasket API",
    description="Consolidated shopping lists for recipes",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag log records emitted during a request with its request id."""
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers["x-request-id"] = request_id
    return response


app.include_router(shopping_list_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "recipebasket-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Recipebasket API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
