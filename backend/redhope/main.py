"""RedHope API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RedHopeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers: RedHopeError (domain), RequestValidationError
      (Pydantic), Exception (catch-all); internal details never leak
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import redhope.infrastructure.database as database
from redhope.api.error_handlers import register_error_handlers
from redhope.api.routes import dashboard, donation_requests, fundings, health, users
from redhope.config import get_settings
from redhope.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("RedHope API started")
    yield
    await manager.dispose()
    logger.info("RedHope API shutting down")


app = FastAPI(title="RedHope API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(dashboard.router)
app.include_router(donation_requests.router)
app.include_router(fundings.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    import uvicorn

    uvicorn.run("redhope.main:app", host="0.0.0.0", port=get_settings().port)


if __name__ == "__main__":
    run()
