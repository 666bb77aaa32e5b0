"""Column schema registry: listing and lifecycle of a project's columns."""

from typing import Dict, Hashable, List, Optional, Union

from loguru import logger

from colstore.entity.dto import (
    ColumnDraft,
    ColumnIdentity,
    ColumnType,
    CustomIdentity,
    ProjectColumn,
    StandardField,
    StandardIdentity,
)
from colstore.errors import (
    DuplicateStandardFieldError,
    InvalidColumnTypeChangeError,
    ProjectNotFoundError,
    ProtectedColumnError,
    SchemaError,
)
from colstore.repository import column as column_repo
from colstore.repository import project as project_repo
from colstore.service import ordering
from colstore.service.ordering import Direction, OrderedItem, OrderingBackend, ReorderResult

ColumnRef = Union[str, StandardField, StandardIdentity, CustomIdentity]


def _sort_key(column: ProjectColumn):
    return (column.order, column.column_id)


def list_active(project_id: str) -> List[ProjectColumn]:
    columns = [c for c in column_repo.list_columns_by_project(project_id) if c.active]
    return sorted(columns, key=_sort_key)


def list_all(project_id: str) -> List[ProjectColumn]:
    return sorted(column_repo.list_columns_by_project(project_id), key=_sort_key)


def get_column(column_id: str) -> Optional[ProjectColumn]:
    return column_repo.get_column(column_id)


def next_order(project_id: str) -> int:
    return max((c.order for c in list_active(project_id)), default=0) + 1


def create(draft: ColumnDraft) -> ProjectColumn:
    if not draft.project_id:
        raise SchemaError("A column needs a project before it can be saved")
    if not project_repo.get_project(draft.project_id):
        raise ProjectNotFoundError(draft.project_id)
    active = list_active(draft.project_id)
    if draft.standard_field is not None:
        if any(c.standard_field == draft.standard_field for c in active):
            raise DuplicateStandardFieldError(draft.project_id, draft.standard_field.value)
    if draft.order is None:
        draft = ColumnDraft(
            project_id=draft.project_id,
            name=draft.name,
            type=draft.type,
            options=draft.options,
            order=max((c.order for c in active), default=0) + 1,
            standard_field=draft.standard_field,
            is_milestone=draft.is_milestone,
        )
    column = column_repo.create_column(draft)
    logger.info(
        "Created column {} '{}' type={} order={} standard_field={} in project {}",
        column.column_id, column.name, column.type.value, column.order,
        column.standard_field.value if column.standard_field else None, column.project_id,
    )
    return column


def rename(column_id: str, name: str) -> Optional[ProjectColumn]:
    name = name.strip()
    if not name:
        raise SchemaError("Column name cannot be empty")
    return column_repo.update_column(column_id, name=name)


def update_options(column_id: str, options: List[str]) -> Optional[ProjectColumn]:
    return column_repo.update_column(column_id, options=[str(o) for o in options])


def set_milestone(column_id: str, is_milestone: bool) -> Optional[ProjectColumn]:
    return column_repo.update_column(column_id, is_milestone=bool(is_milestone))


def change_type(column_id: str, new_type: ColumnType) -> Optional[ProjectColumn]:
    """Saved columns are type-locked; re-sending the current type is accepted."""
    column = column_repo.get_column(column_id)
    if not column:
        return None
    new_type = ColumnType(new_type)
    if column.type is not new_type:
        raise InvalidColumnTypeChangeError(column_id, column.type.value, new_type.value)
    return column


def update_column(column_id: str, **fields) -> Optional[ProjectColumn]:
    column = column_repo.get_column(column_id)
    if not column:
        return None
    if "type" in fields:
        change_type(column_id, fields.pop("type"))
    if "name" in fields:
        column = rename(column_id, fields.pop("name"))
    if "options" in fields:
        column = update_options(column_id, fields.pop("options") or [])
    if "is_milestone" in fields:
        column = set_milestone(column_id, fields.pop("is_milestone"))
    if fields:
        raise SchemaError(f"Cannot update column fields: {', '.join(sorted(fields))}")
    return column


def soft_delete(column_id: str) -> Optional[ProjectColumn]:
    column = column_repo.get_column(column_id)
    if not column:
        return None
    if column.is_protected:
        raise ProtectedColumnError(column_id, column.standard_field.value)
    logger.info("Deactivating column {} '{}' in project {}", column_id, column.name, column.project_id)
    return column_repo.update_column(column_id, active=False)


def toggle_visibility(column_id: str) -> Optional[ProjectColumn]:
    column = column_repo.get_column(column_id)
    if not column:
        return None
    if not column.is_protected:
        raise SchemaError(f"Column '{column_id}' is not a standard column, delete it instead of hiding it")
    return column_repo.update_column(column_id, hidden=not column.hidden)


def parse_ref(token: str) -> ColumnRef:
    """Read ``standard:<field>`` / ``custom:<id>``; anything else is a column id."""
    kind, sep, value = token.partition(":")
    if sep and kind == "standard":
        return StandardIdentity(StandardField(value))
    if sep and kind == "custom":
        return CustomIdentity(value)
    return token


class ColumnOrdering(OrderingBackend):
    """Active columns of a project, keyed by column identity."""

    def __init__(self):
        self._ids: Dict[ColumnIdentity, str] = {}

    def list_items(self, collection_id: str) -> List[OrderedItem]:
        columns = list_active(collection_id)
        self._ids = {c.identity: c.column_id for c in columns}
        return [OrderedItem(key=c.identity, order=c.order, tiebreak=c.column_id) for c in columns]

    def set_order(self, collection_id: str, key: Hashable, order: int) -> None:
        column_repo.update_column(self._ids[key], order=order)

    def resolve(self, collection_id: str, ref: ColumnRef) -> Optional[ColumnIdentity]:
        if isinstance(ref, StandardField):
            return StandardIdentity(ref)
        if isinstance(ref, (StandardIdentity, CustomIdentity)):
            return ref
        for column in list_active(collection_id):
            if column.column_id == ref:
                return column.identity
        return None


def reorder_columns(project_id: str, moved: ColumnRef, target: ColumnRef) -> Optional[ReorderResult]:
    backend = ColumnOrdering()
    moved_key = backend.resolve(project_id, moved)
    target_key = backend.resolve(project_id, target)
    if moved_key is None or target_key is None:
        return None
    return ordering.reorder(backend, project_id, moved_key, target_key)


def move_column(project_id: str, column: ColumnRef, direction: Direction) -> Optional[ReorderResult]:
    backend = ColumnOrdering()
    key = backend.resolve(project_id, column)
    if key is None:
        return None
    return ordering.move_adjacent(backend, project_id, key, direction)
