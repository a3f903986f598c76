"""
Placement Management API - Main Application

FastAPI backend with:
- PostgreSQL for all structured data, views, audit triggers and stored routines
- JSON endpoints under /api
- Static front end served from /frontend/public

Run: uvicorn placement_api.main:app --reload
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from placement_api import __version__
from placement_api.api.routes import api_router, debug_router
from placement_api.core.config import Settings, get_settings
from placement_api.core.errors import register_error_handlers
from placement_api.core.logging_config import setup_logging
from placement_api.db.postgres import PlacementStore, get_store
from placement_api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application: logging, CORS, error handlers, routes and static files."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Placement Management API",
        description="""
        Placement management over a relational store.

        ## Features
        - **Entities**: students, departments, companies, job roles, placements
        - **Aggregate fetch**: every collection in one response
        - **Stored procedures**: statistics, eligibility, applications, placement recording
        - **Views**: placement-ready students, active jobs, placement summary
        - **Audit**: trigger-maintained student history
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Store and request-parsing failures are reported as 500 {"error": ...}
    app.include_router(api_router, prefix="/api", responses={500: {"model": ErrorResponse}})
    app.include_router(debug_router)

    frontend_dir = settings.frontend_dir
    if os.path.exists(frontend_dir):
        app.mount("/static", StaticFiles(directory=frontend_dir), name="static")

    @app.get("/", tags=["Frontend"], include_in_schema=False)
    async def serve_frontend():
        """Serve the front end."""
        index_path = os.path.join(frontend_dir, "index.html")
        if os.path.exists(index_path):
            return FileResponse(index_path)
        return {"status": "healthy", "app": "Placement Management API", "message": "Frontend not found. API is running."}

    @app.get("/health", tags=["Health"])
    def health_check(store: PlacementStore = Depends(get_store)):
        """Database connectivity check."""
        return {
            "status": "healthy",
            "database": "connected" if store.ping() else "disconnected"
        }

    logger.info("🚀 Placement Management API ready (database %s:%s/%s)",
                settings.postgres_host, settings.postgres_port, settings.postgres_db)
    return app


app = create_app()
