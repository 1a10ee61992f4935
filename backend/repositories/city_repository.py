"""City repository: cities are owned elsewhere; only lookups and seeding live here."""
import uuid
from typing import Optional

from sqlalchemy.orm import Session

from models.city import City


def get_city(session: Session, city_id: str) -> Optional[City]:
    """Return a city by id or None."""
    return session.get(City, city_id)


def create_city(session: Session, name: str, status: str = "Active", city_id: str | None = None) -> City:
    """Create a city, commit, and return it. Id is generated if not provided."""
    city = City(id=city_id or str(uuid.uuid4()), name=name, status=status)
    session.add(city)
    session.commit()
    session.refresh(city)
    return city
