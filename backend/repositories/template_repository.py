"""Template repository: paginated search, get, create, update, delete."""
from typing import Any, Optional

from sqlalchemy import ColumnElement, and_, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.template import Template

UPDATABLE_FIELDS = ("name", "type", "subject", "body", "description", "status", "created_by")


def build_template_filter(
    template_type: str | None = None,
    search: str | None = None,
) -> Optional[ColumnElement[bool]]:
    """AND of the type filter and the name/body/subject search group; None when neither is given."""
    filters: list[ColumnElement[bool]] = []
    if template_type:
        filters.append(Template.type == template_type)
    if search and search.strip():
        term = search.strip()
        filters.append(
            or_(
                Template.name.icontains(term, autoescape=True),
                Template.body.icontains(term, autoescape=True),
                Template.subject.icontains(term, autoescape=True),
            )
        )
    if not filters:
        return None
    return and_(*filters)


def list_templates(
    session: Session,
    *,
    template_type: str | None = None,
    search: str | None = None,
    offset: int = 0,
    limit: int = 10,
) -> tuple[list[Template], int]:
    """Return (page of templates ordered by updated_at desc, total matching count)."""
    where = build_template_filter(template_type, search)
    stmt = select(Template)
    count_stmt = select(func.count()).select_from(Template)
    if where is not None:
        stmt = stmt.where(where)
        count_stmt = count_stmt.where(where)
    stmt = stmt.order_by(Template.updated_at.desc(), Template.id).offset(offset).limit(limit)
    rows = list(session.execute(stmt).scalars().all())
    total = session.execute(count_stmt).scalar() or 0
    return rows, total


def get_template(session: Session, template_id: str) -> Optional[Template]:
    """Return a template by id or None."""
    return session.get(Template, template_id)


def get_template_by_name(session: Session, name: str) -> Optional[Template]:
    """Return a template by its unique name or None."""
    return session.execute(
        select(Template).where(Template.name == name)
    ).scalar_one_or_none()


def _commit(session: Session) -> None:
    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise


def create_template(
    session: Session,
    *,
    name: str,
    template_type: str,
    body: str,
    subject: str = "",
    description: str = "",
    status: str = "Active",
    created_by: str = "system",
) -> Template:
    """Create a template, commit, and return it. The name UNIQUE constraint still applies."""
    tpl = Template(
        name=name,
        type=template_type,
        subject=subject,
        body=body,
        description=description,
        status=status,
        created_by=created_by,
    )
    session.add(tpl)
    _commit(session)
    session.refresh(tpl)
    return tpl


def update_template(session: Session, template_id: str, fields: dict[str, Any]) -> Optional[Template]:
    """Apply a partial update. Returns None if the template does not exist."""
    tpl = get_template(session, template_id)
    if tpl is None:
        return None
    for key, value in fields.items():
        if key in UPDATABLE_FIELDS:
            setattr(tpl, key, value)
    _commit(session)
    session.refresh(tpl)
    return tpl


def delete_template(session: Session, template_id: str) -> bool:
    """Delete a template by id. Returns True if deleted, False if not found."""
    tpl = get_template(session, template_id)
    if tpl is None:
        return False
    session.delete(tpl)
    _commit(session)
    return True
