"""Parse loosely-typed query parameters into list bounds and search terms."""
import math
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
# Larger values cannot be bound as a LIMIT/OFFSET on every backend; treated as unparseable.
MAX_INT_PARAM = 2**31 - 1


@dataclass(frozen=True)
class Pagination:
    """Resolved page window: 1-based page, page size and row offset."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _positive_int(raw: str | int | None) -> int | None:
    """Return raw as a positive int, or None if missing, unparseable, < 1 or > MAX_INT_PARAM."""
    if raw is None:
        return None
    try:
        n = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return n if 1 <= n <= MAX_INT_PARAM else None


def parse_limit(raw: str | int | None) -> int | None:
    """Result cap for unpaginated lists. None means unbounded."""
    return _positive_int(raw)


def parse_pagination(page: str | int | None, limit: str | int | None) -> Pagination:
    """Page/limit with fallback to 1/10 for absent, unparseable or non-positive values."""
    return Pagination(
        page=_positive_int(page) or DEFAULT_PAGE,
        limit=_positive_int(limit) or DEFAULT_PAGE_SIZE,
    )


def total_pages(total: int, limit: int) -> int:
    """Ceiling of total / limit; 0 when there are no rows."""
    if total <= 0:
        return 0
    return math.ceil(total / limit)


def clean_search(raw: str | None) -> str | None:
    """Trimmed search term, or None when blank."""
    if raw is None:
        return None
    s = raw.strip()
    return s or None
