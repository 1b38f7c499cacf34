# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from src.config import settings
from src.database import SessionLocal
from src.schemas.common import HealthResponse
from src.services import auth_service, member_service

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup: expire sessions and memberships that ran out while the app was down
    db = SessionLocal()
    try:
        removed = auth_service.cleanup_expired_sessions(db)
        logger.info(f"Removed {removed} expired sessions")
        expired = member_service.expire_memberships(db)
        logger.info(f"Marked {expired} memberships as expired")
    except SQLAlchemyError as e:
        logger.error(f"Error during startup cleanup: {e}")
    finally:
        db.close()

    yield

    logger.info(f"Shutting down {settings.app_name}")

app = FastAPI(
    title=settings.app_name,
    description="Staff management for fitness centers: tasks, schedules, reports and access control",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from src.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")


def resolve_static_file(root: Path, full_path: str) -> Path | None:
    """Return the file under ``root`` a request path points at, if any.

    Anything that resolves outside ``root``, such as ``..`` segments or
    absolute paths, is treated as missing.
    """
    static_root = root.resolve()
    file_path = (static_root / full_path).resolve()
    if not file_path.is_relative_to(static_root) or not file_path.is_file():
        return None
    return file_path


def mount_frontend(app: FastAPI, static_path: Path) -> None:
    """Serve the built SPA, falling back to index.html for client-side routes."""
    index_file = static_path / "index.html"

    # Mount static assets (JS, CSS, images)
    app.mount("/assets", StaticFiles(directory=static_path / "assets"), name="assets")

    # Serve index.html for root
    @app.get("/")
    async def serve_root() -> FileResponse:
        """Serve the main SPA entry point."""
        return FileResponse(index_file)

    # Catch-all route for SPA - must be last
    @app.get("/{full_path:path}")
    async def serve_spa(request: Request, full_path: str) -> FileResponse:
        """Serve SPA assets or fall back to index.html for client-side routing."""
        file_path = resolve_static_file(static_path, full_path)
        if file_path is not None:
            return FileResponse(file_path)
        return FileResponse(index_file)


# Mount static files for production frontend (if directory exists)
static_path = Path("static")
if static_path.exists():
    mount_frontend(app, static_path)
