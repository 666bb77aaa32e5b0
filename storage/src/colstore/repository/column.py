"""Function-based custom column repository using SQLAlchemy sessions."""

from typing import List, Optional
from colstore.entity.column import ColumnEntity
from colstore.entity.dto import ColumnDraft, ColumnType, ProjectColumn, StandardField
from colstore.database.base import get_db
from colstore.util import generate_id

_UPDATABLE_FIELDS = {"name", "type", "options", "order", "is_milestone", "active", "hidden"}


def _entity_to_dto(entity: ColumnEntity) -> ProjectColumn:
    return ProjectColumn(
        column_id=entity.column_id,
        project_id=entity.project_id,
        name=entity.name,
        type=ColumnType(entity.type),
        order=entity.order,
        options=list(entity.options) if entity.options is not None else None,
        standard_field=StandardField(entity.standard_field) if entity.standard_field else None,
        is_milestone=bool(entity.is_milestone),
        active=bool(entity.active),
        hidden=bool(entity.hidden),
        created_at=entity.created_at if entity.created_at else None,
        updated_at=entity.updated_at if entity.updated_at else None,
    )


def create_column(draft: ColumnDraft) -> ProjectColumn:
    with get_db() as session:
        entity = ColumnEntity(
            column_id=generate_id(),
            project_id=draft.project_id,
            name=draft.name,
            type=draft.type.value,
            options=list(draft.options) if draft.options is not None else None,
            order=draft.order if draft.order is not None else 0,
            standard_field=draft.standard_field.value if draft.standard_field else None,
            is_milestone=draft.is_milestone,
            active=True,
            hidden=False,
        )
        session.add(entity)
        session.flush()
        return _entity_to_dto(entity)


def update_column(column_id: str, **patch) -> Optional[ProjectColumn]:
    unknown = set(patch) - _UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Unknown column fields: {', '.join(sorted(unknown))}")
    with get_db() as session:
        entity = session.query(ColumnEntity).filter_by(column_id=column_id).first()
        if not entity:
            return None
        for k, v in patch.items():
            if k == "type" and isinstance(v, ColumnType):
                v = v.value
            elif k == "options" and v is not None:
                v = list(v)
            setattr(entity, k, v)
        session.flush()
        return _entity_to_dto(entity)


def get_column(column_id: str) -> Optional[ProjectColumn]:
    with get_db() as session:
        row = session.query(ColumnEntity).filter_by(column_id=column_id).first()
        if row:
            return _entity_to_dto(row)
        return None


def list_columns_by_project(project_id: str) -> List[ProjectColumn]:
    """Every column of the project, inactive ones included."""
    with get_db() as session:
        rows = (
            session.query(ColumnEntity)
            .filter_by(project_id=project_id)
            .order_by(ColumnEntity.order.asc(), ColumnEntity.column_id.asc())
            .all()
        )
        return [_entity_to_dto(r) for r in rows]
