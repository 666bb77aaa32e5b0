"""Default column provisioning for new and existing projects."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from loguru import logger

from colstore.entity.dto import ColumnDraft, ColumnType, ProjectColumn, StandardField
from colstore.service import schema_registry

TASK_STATUSES = ["pending", "in_progress", "blocked", "completed", "cancelled"]
TASK_PRIORITIES = ["low", "medium", "high", "urgent"]


@dataclass(frozen=True)
class DefaultColumn:
    standard_field: StandardField
    name: str
    type: ColumnType
    options: Optional[List[str]] = None


# Every project starts with these, in this order
CANONICAL_COLUMNS: List[DefaultColumn] = [
    DefaultColumn(StandardField.NAME, "Task", ColumnType.TEXT),
    DefaultColumn(StandardField.DESCRIPTION, "Description", ColumnType.TEXT),
    DefaultColumn(StandardField.RESPONSIBLE, "Responsible", ColumnType.USER),
    DefaultColumn(StandardField.STATUS, "Status", ColumnType.LIST, TASK_STATUSES),
    DefaultColumn(StandardField.PRIORITY, "Priority", ColumnType.LIST, TASK_PRIORITIES),
    DefaultColumn(StandardField.START_DATE, "Start date", ColumnType.DATE),
    DefaultColumn(StandardField.END_DATE, "End date", ColumnType.DATE),
    DefaultColumn(StandardField.PROGRESS, "Progress", ColumnType.PERCENTAGE),
]


@dataclass
class RestoreResult:
    created: List[ProjectColumn] = field(default_factory=list)

    @property
    def nothing_to_restore(self) -> bool:
        return not self.created


def _draft(project_id: str, default: DefaultColumn, order: int) -> ColumnDraft:
    return ColumnDraft(
        project_id=project_id,
        name=default.name,
        type=default.type,
        options=list(default.options) if default.options else None,
        order=order,
        standard_field=default.standard_field,
    )


def on_project_created(project_id: str, pending: Optional[Sequence[ColumnDraft]] = None) -> List[ProjectColumn]:
    """Insert the canonical columns, then any pending ones after them in their given order."""
    created = [
        schema_registry.create(_draft(project_id, default, order))
        for order, default in enumerate(CANONICAL_COLUMNS, start=1)
    ]
    start = len(CANONICAL_COLUMNS) + 1
    for offset, draft in enumerate(pending or []):
        created.append(schema_registry.create(ColumnDraft(
            project_id=project_id,
            name=draft.name,
            type=draft.type,
            options=draft.options,
            order=start + offset,
            standard_field=draft.standard_field,
            is_milestone=draft.is_milestone,
        )))
    logger.info("Provisioned {} columns for project {} ({} pending)", len(created), project_id, len(pending or []))
    return created


def missing_defaults(project_id: str) -> List[DefaultColumn]:
    present = {c.standard_field for c in schema_registry.list_active(project_id) if c.standard_field}
    return [d for d in CANONICAL_COLUMNS if d.standard_field not in present]


def restore_missing_defaults(project_id: str) -> RestoreResult:
    missing = missing_defaults(project_id)
    if not missing:
        logger.info("Nothing to restore for project {}", project_id)
        return RestoreResult()
    start = schema_registry.next_order(project_id)
    result = RestoreResult(created=[
        schema_registry.create(_draft(project_id, default, start + offset))
        for offset, default in enumerate(missing)
    ])
    logger.info(
        "Restored {} default columns for project {}: {}",
        len(result.created), project_id, ", ".join(d.standard_field.value for d in missing),
    )
    return result
