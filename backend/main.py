"""Locations & templates API — FastAPI backend."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI

from utils.config import CORS_ORIGINS, LOG_LEVEL, RUN_MIGRATIONS

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
from fastapi.middleware.cors import CORSMiddleware

from api.locations import router as locations_router
from api.routes import router
from api.templates import router as templates_router
from utils.errors import register_error_handlers

LOG = logging.getLogger(__name__)

app = FastAPI(
    title="Locations & Templates API",
    description="CRUD for locations (grouped by city) and message templates",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(router, prefix="/api")
app.include_router(locations_router, prefix="/api")
app.include_router(templates_router, prefix="/api")


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations unless disabled (tests build tables from metadata)."""
    if not RUN_MIGRATIONS:
        return
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")
    LOG.info("Database migrations applied")


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "locations-templates-api", "docs": "/docs", "health": "/api/health"}
