# Schemas package
from .health import HealthResponse
from .locations import CityLocationsResponse, CityRef, LocationCreate, LocationResponse, LocationUpdate, MessageResponse
from .templates import (
    TemplateCreate,
    TemplateDeleted,
    TemplateEnvelope,
    TemplateListResponse,
    TemplateResponse,
    TemplateUpdate,
)

__all__ = [
    "CityLocationsResponse",
    "CityRef",
    "HealthResponse",
    "LocationCreate",
    "LocationResponse",
    "LocationUpdate",
    "MessageResponse",
    "TemplateCreate",
    "TemplateDeleted",
    "TemplateEnvelope",
    "TemplateListResponse",
    "TemplateResponse",
    "TemplateUpdate",
]
