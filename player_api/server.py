"""FastAPI server for the player registry."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from .api import router as api_router, get_player_repo
from .env_config import load_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for app startup/shutdown."""
    settings = load_settings()
    configure_logging(settings.log_level)

    repo = get_player_repo()
    logger.info("Player registry started with %d players", repo.count())

    yield

    logger.info("Player registry stopped")


app = FastAPI(
    title="Player Registry API",
    description="REST API for managing player records",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/rest/docs",
    redoc_url="/rest/redoc",
)


def custom_openapi():
    """Custom OpenAPI schema with enhanced documentation."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title="Player Registry API",
        version="1.0.0",
        description="""
# Player Registry API

REST API for creating, listing, updating and deleting player records.

## Features
- Filter players by name, title, race, profession, birthday range,
  ban state, experience and level
- Sort by id, name, experience or birthday
- Page through results (`pageNumber`, `pageSize`)
- Level and experience-to-next-level derived from experience

## Conventions
- Birthdays are epoch milliseconds (UTC)
- Invalid input answers 400, unknown ids answer 404
        """,
        routes=app.routes,
    )

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed query parameters and bodies as 400 Bad Request."""
    logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": "Malformed request", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors reduced to JSON-safe location/message pairs."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


# Include routers
app.include_router(api_router, prefix="/rest")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
