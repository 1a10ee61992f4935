"""SQLAlchemy declarative base and models."""
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    """Timezone-aware now, used for createdAt/updatedAt defaults."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all DB models."""
    pass
