"""Pydantic schemas for template API."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TemplateCreate(BaseModel):
    """Payload for creating a template. name, type and body are checked by the handler."""

    name: str | None = None
    type: str | None = None
    body: str | None = None
    subject: str = ""
    description: str = ""
    status: str = "Active"


class TemplateUpdate(BaseModel):
    """Partial update; identity and timestamp keys are dropped."""

    name: str | None = None
    type: str | None = None
    subject: str | None = None
    body: str | None = None
    description: str | None = None
    status: str | None = None
    createdBy: str | None = None


class TemplateResponse(BaseModel):
    """Template in list/detail responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    type: str
    subject: str
    body: str
    description: str
    createdBy: str
    status: str
    createdAt: datetime
    updatedAt: datetime


class TemplateEnvelope(BaseModel):
    """Single-template response."""

    success: bool = True
    data: TemplateResponse


class TemplateListResponse(BaseModel):
    """Paginated template list."""

    success: bool = True
    total: int
    currentPage: int
    totalPages: int
    data: list[TemplateResponse]


class TemplateDeleted(BaseModel):
    """Response for DELETE /templates/{id}."""

    success: bool = True
    message: str
