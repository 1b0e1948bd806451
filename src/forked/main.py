"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from forked import __version__
from forked.config import get_settings
from forked.database import create_engine, create_session_factory, init_models
from forked.logging_config import LoggingContext, configure_logging, get_logger
from forked.routers import (
    comments_router,
    recipes_router,
    shopping_list_router,
    users_router,
)

settings = get_settings()

# Configure logging on module load
configure_logging(settings.log_level)
logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Starting Forked API")

    if not settings.jwt_secret:
        raise RuntimeError("JWT_SECRET is not configured")

    engine = create_engine(settings.database_url, echo=settings.is_development)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    await init_models(engine)
    logger.info("Database tables initialized")

    yield

    logger.info("Shutting down Forked API")
    await engine.dispose()


app = FastAPI(
    title="Forked API",
    description="Recipe sharing with aggregated shopping lists",
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
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag every log line of a request with its request id."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


app.include_router(users_router)
app.include_router(recipes_router)
app.include_router(shopping_list_router)
app.include_router(comments_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "forked-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Forked API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
