"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "8001"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

TESTING = os.environ.get("TESTING") == "true"

# When TESTING=true, use test DB URL so tests never touch production.
if TESTING:
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./locations.db",
    )

# Tests build the schema from model metadata instead of running Alembic.
RUN_MIGRATIONS = not TESTING and os.environ.get("RUN_MIGRATIONS", "true").lower() == "true"

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8080"
    ).split(",")
    if origin.strip()
]
