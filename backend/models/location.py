"""Location model for DB persistence."""
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models import Base, utcnow
from models.city import City


class Location(Base):
    """Location table: id, name, status, city_id, created_at, updated_at."""

    __tablename__ = "location"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="Active")
    # Nullable only so an out-of-band City delete leaves the row readable (City -> null).
    city_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("city.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    city: Mapped[Optional[City]] = relationship(City, lazy="joined")
