"""Location repository: filtered list, get, create, update, delete."""
from typing import Any, Optional

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.location import Location

# Columns a partial update may touch; everything else is ignored.
UPDATABLE_FIELDS = ("name", "status", "city_id")


def build_location_filters(keyword: str | None = None, city_id: str | None = None) -> list[ColumnElement[bool]]:
    """Keyword is a case-insensitive substring match on name; city is an exact city_id match."""
    clauses: list[ColumnElement[bool]] = []
    if keyword and keyword.strip():
        clauses.append(Location.name.icontains(keyword.strip(), autoescape=True))
    if city_id:
        clauses.append(Location.city_id == city_id)
    return clauses


def list_locations(
    session: Session,
    *,
    keyword: str | None = None,
    city_id: str | None = None,
    limit: int | None = None,
) -> list[Location]:
    """Return matching locations ordered by name, with city loaded. limit=None is unbounded."""
    stmt = (
        select(Location)
        .where(*build_location_filters(keyword, city_id))
        .order_by(Location.name.asc())
    )
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(session.execute(stmt).scalars().all())


def list_locations_by_city(session: Session, city_id: str) -> list[Location]:
    """Return all locations of a city, newest first."""
    result = session.execute(
        select(Location)
        .where(Location.city_id == city_id)
        .order_by(Location.created_at.desc())
    )
    return list(result.scalars().all())


def get_location(session: Session, location_id: str) -> Optional[Location]:
    """Return a location by id or None."""
    return session.get(Location, location_id)


def count_locations(session: Session) -> int:
    """Return the number of locations."""
    result = session.execute(select(func.count()).select_from(Location))
    return result.scalar() or 0


def _commit(session: Session) -> None:
    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise


def create_location(session: Session, *, name: str, city_id: str, status: str = "Active") -> Location:
    """Create a location, commit, and return it. Raises IntegrityError if city_id is unknown."""
    loc = Location(name=name, status=status, city_id=city_id)
    session.add(loc)
    _commit(session)
    session.refresh(loc)
    return loc


def update_location(session: Session, location_id: str, fields: dict[str, Any]) -> Optional[Location]:
    """Apply a partial update. Returns None if the location does not exist."""
    loc = get_location(session, location_id)
    if loc is None:
        return None
    for key, value in fields.items():
        if key in UPDATABLE_FIELDS:
            setattr(loc, key, value)
    _commit(session)
    session.refresh(loc)
    return loc


def delete_location(session: Session, location_id: str) -> bool:
    """Delete a location by id. Returns True if deleted, False if not found."""
    loc = get_location(session, location_id)
    if loc is None:
        return False
    session.delete(loc)
    _commit(session)
    return True
