"""Template API routes."""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db import get_db
from models.template import Template
from repositories.template_repository import (
    create_template as repo_create_template,
    delete_template as repo_delete_template,
    get_template as repo_get_template,
    get_template_by_name as repo_get_template_by_name,
    list_templates as repo_list_templates,
    update_template as repo_update_template,
)
from schemas.templates import (
    TemplateCreate,
    TemplateDeleted,
    TemplateEnvelope,
    TemplateListResponse,
    TemplateResponse,
    TemplateUpdate,
)
from utils.auth import SYSTEM_USER, current_user_id
from utils.errors import ConflictError, DataStoreError, NotFoundError, ValidationError, store_message
from utils.query_params import clean_search, parse_pagination, total_pages

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


def template_to_response(tpl: Template) -> TemplateResponse:
    """Build TemplateResponse from model instance."""
    return TemplateResponse(
        id=tpl.id,
        name=tpl.name,
        type=tpl.type,
        subject=tpl.subject,
        body=tpl.body,
        description=tpl.description,
        createdBy=tpl.created_by,
        status=tpl.status,
        createdAt=tpl.created_at,
        updatedAt=tpl.updated_at,
    )


@router.post("", response_model=TemplateEnvelope, status_code=status.HTTP_201_CREATED)
def create_template(
    body: TemplateCreate,
    user_id: str | None = Depends(current_user_id),
    db: Session = Depends(get_db),
) -> TemplateEnvelope:
    """Create a template; 409 if the name is taken."""
    if not body.name or not body.type or not body.body:
        raise ValidationError("name, type and body are required")
    try:
        if repo_get_template_by_name(db, body.name) is not None:
            raise ConflictError("Template with this name already exists")
        tpl = repo_create_template(
            db,
            name=body.name,
            template_type=body.type,
            body=body.body,
            subject=body.subject,
            description=body.description,
            status=body.status,
            created_by=user_id or SYSTEM_USER,
        )
    except SQLAlchemyError as e:
        raise DataStoreError(store_message(e)) from e
    LOG.info("Created template %s (%s) by %s", tpl.id, tpl.name, tpl.created_by)
    return TemplateEnvelope(data=template_to_response(tpl))


@router.get("", response_model=TemplateListResponse)
def list_templates(
    page: str | None = None,
    limit: str | None = None,
    type: str | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
) -> TemplateListResponse:
    """Paginated list, newest update first; type is exact, search spans name/body/subject."""
    pagination = parse_pagination(page, limit)
    try:
        rows, total = repo_list_templates(
            db,
            template_type=type or None,
            search=clean_search(search),
            offset=pagination.offset,
            limit=pagination.limit,
        )
    except SQLAlchemyError as e:
        raise DataStoreError(store_message(e)) from e
    return TemplateListResponse(
        total=total,
        currentPage=pagination.page,
        totalPages=total_pages(total, pagination.limit),
        data=[template_to_response(t) for t in rows],
    )


@router.get("/{template_id}", response_model=TemplateEnvelope)
def get_template(template_id: str, db: Session = Depends(get_db)) -> TemplateEnvelope:
    """Get one template by id."""
    try:
        tpl = repo_get_template(db, template_id)
    except SQLAlchemyError as e:
        raise DataStoreError(store_message(e)) from e
    if tpl is None:
        raise NotFoundError("Template not found")
    return TemplateEnvelope(data=template_to_response(tpl))


@router.patch("/{template_id}", response_model=TemplateEnvelope)
def update_template(
    template_id: str,
    body: TemplateUpdate,
    db: Session = Depends(get_db),
) -> TemplateEnvelope:
    """Partially update a template."""
    fields = body.model_dump(exclude_unset=True)
    if "createdBy" in fields:
        fields["created_by"] = fields.pop("createdBy")
    try:
        tpl = repo_update_template(db, template_id, fields)
    except SQLAlchemyError as e:
        raise DataStoreError(store_message(e)) from e
    if tpl is None:
        raise NotFoundError("Template not found")
    LOG.info("Updated template %s", template_id)
    return TemplateEnvelope(data=template_to_response(tpl))


@router.delete("/{template_id}", response_model=TemplateDeleted)
def delete_template(template_id: str, db: Session = Depends(get_db)) -> TemplateDeleted:
    """Delete a template by id."""
    try:
        deleted = repo_delete_template(db, template_id)
    except SQLAlchemyError as e:
        raise DataStoreError(store_message(e)) from e
    if not deleted:
        raise NotFoundError("Template not found")
    LOG.info("Deleted template %s", template_id)
    return TemplateDeleted(message="Template deleted")
