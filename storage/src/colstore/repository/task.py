"""Function-based task repository; owns the sparse per-task value map."""

from typing import Any, List, Optional
from colstore.entity.task import TaskEntity
from colstore.entity.dto import Task
from colstore.database.base import get_db
from colstore.util import generate_id


def _entity_to_dto(entity: TaskEntity) -> Task:
    return Task(
        task_id=entity.task_id,
        project_id=entity.project_id,
        name=entity.name,
        custom_values=dict(entity.custom_values or {}),
        updated_at=entity.updated_at if entity.updated_at else None,
    )


def create_task(project_id: str, name: str) -> Task:
    with get_db() as session:
        entity = TaskEntity(task_id=generate_id(), project_id=project_id, name=name, custom_values={})
        session.add(entity)
        session.flush()
        return _entity_to_dto(entity)


def get_task(task_id: str) -> Optional[Task]:
    with get_db() as session:
        row = session.query(TaskEntity).filter_by(task_id=task_id).first()
        return _entity_to_dto(row) if row else None


def list_tasks(project_id: str) -> List[Task]:
    with get_db() as session:
        rows = session.query(TaskEntity).filter_by(project_id=project_id).order_by(TaskEntity.id.asc()).all()
        return [_entity_to_dto(r) for r in rows]


def get_task_value(task_id: str, column_id: str) -> Optional[Any]:
    with get_db() as session:
        row = session.query(TaskEntity).filter_by(task_id=task_id).first()
        if not row:
            return None
        return (row.custom_values or {}).get(column_id)


def set_task_value(task_id: str, column_id: str, value: Any) -> bool:
    with get_db() as session:
        entity = session.query(TaskEntity).filter_by(task_id=task_id).first()
        if not entity:
            return False
        # JSON columns only track reassignment, not in-place mutation
        values = dict(entity.custom_values or {})
        values[column_id] = value
        entity.custom_values = values
        session.flush()
        return True


def clear_task_value(task_id: str, column_id: str) -> bool:
    with get_db() as session:
        entity = session.query(TaskEntity).filter_by(task_id=task_id).first()
        if not entity:
            return False
        values = dict(entity.custom_values or {})
        if column_id not in values:
            return False
        del values[column_id]
        entity.custom_values = values
        session.flush()
        return True
