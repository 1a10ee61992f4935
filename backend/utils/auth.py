"""Resolve the acting user for audit fields."""
from fastapi import Header

SYSTEM_USER = "system"


def current_user_id(x_user_id: str | None = Header(default=None)) -> str | None:
    """FastAPI dependency: user id forwarded by the auth gateway in X-User-Id, if any."""
    if x_user_id is None:
        return None
    return x_user_id.strip() or None
