"""Task service: typed reads and writes of per-column task values."""

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from colstore.entity.dto import ProjectColumn, Task
from colstore.errors import ProjectNotFoundError, SchemaError
from colstore.repository import column as column_repo
from colstore.repository import project as project_repo
from colstore.repository import task as task_repo
from colstore.service import filter_engine, schema_registry, values
from colstore.service.filter_engine import FiltersState
from colstore.service.values import CellValue


def create_task(project_id: str, name: str) -> Task:
    if not project_repo.get_project(project_id):
        raise ProjectNotFoundError(project_id)
    return task_repo.create_task(project_id, name)


def _without_deleted(task: Task, columns: Iterable[ProjectColumn]) -> Task:
    # Values of deleted columns stay stored but are not read back
    active = {c.column_id for c in columns}
    return replace(task, custom_values={k: v for k, v in task.custom_values.items() if k in active})


def get_task(task_id: str) -> Optional[Task]:
    task = task_repo.get_task(task_id)
    if not task:
        return None
    return _without_deleted(task, schema_registry.list_active(task.project_id))


def list_tasks(project_id: str) -> List[Task]:
    columns = schema_registry.list_active(project_id)
    return [_without_deleted(t, columns) for t in task_repo.list_tasks(project_id)]


def _writable_column(task: Task, column_id: str) -> Optional[ProjectColumn]:
    column = column_repo.get_column(column_id)
    if not column:
        return None
    if column.project_id != task.project_id:
        raise SchemaError(f"Column '{column_id}' does not belong to project '{task.project_id}'")
    if not column.active:
        raise SchemaError(f"Column '{column_id}' was deleted")
    return column


def set_value(task_id: str, column_id: str, raw: Any) -> Optional[CellValue]:
    task = task_repo.get_task(task_id)
    if not task:
        return None
    column = _writable_column(task, column_id)
    if not column:
        return None
    value = values.coerce(column.type, raw)
    task_repo.set_task_value(task_id, column_id, values.to_storage(value))
    logger.debug("Set task {} column {} ({}) = {!r}", task_id, column_id, column.type.value, value.value)
    return value


def clear_value(task_id: str, column_id: str) -> bool:
    return task_repo.clear_task_value(task_id, column_id)


def get_value(task_id: str, column_id: str) -> Optional[CellValue]:
    column = column_repo.get_column(column_id)
    if not column or not column.active:
        return None
    return values.from_storage(column, task_repo.get_task_value(task_id, column_id))


def typed_values(task: Task, columns: List[ProjectColumn]) -> Dict[str, CellValue]:
    """The task's values for ``columns`` that are set, as typed variants."""
    result = {}
    for column in columns:
        value = values.from_storage(column, task.custom_values.get(column.column_id))
        if value is not None:
            result[column.column_id] = value
    return result


def filter_tasks(project_id: str, filters: FiltersState) -> List[Task]:
    columns = schema_registry.list_active(project_id)
    tasks = [_without_deleted(t, columns) for t in task_repo.list_tasks(project_id)]
    matched = [t for t in tasks if filter_engine.evaluate(t.custom_values, filters, columns)]
    logger.debug(
        "Filtered project {}: {}/{} tasks with {} active filters",
        project_id, len(matched), len(tasks), filter_engine.count_active(filters),
    )
    return matched
