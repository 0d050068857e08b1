"""To-Do API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoAppError → {"error": message} JSON responses
    - CORS configured from settings (not hardcoded)
    - Settings load at import: a missing JWT_SECRET stops the process before it serves
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Frontend bundle mounted last so /api/* always wins; non-API, extension-less
      paths fall back to index.html
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_app.api.error_handlers import register_error_handlers
from todo_app.api.routes import admin, auth, categories, health, todos
from todo_app.config import get_settings
from todo_app.infrastructure import database
from todo_app.infrastructure.observability import setup_logging

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
    logger.info("To-Do API started")
    yield
    await manager.dispose()
    logger.info("To-Do API shutting down")


class SPAStaticFiles(StaticFiles):
    """Static files with index.html fallback for client-side routes."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404 or path.startswith("api") or "." in path:
                raise
            return await super().get_response("index.html", scope)


app = FastAPI(
    title="To-Do API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(todos.router)
app.include_router(admin.router)

if os.path.isdir(settings.static_dir):
    app.mount(
        "/", SPAStaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )
