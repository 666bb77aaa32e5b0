"""Function-based project repository using SQLAlchemy sessions."""

from typing import Optional
from colstore.entity.project import ProjectEntity
from colstore.entity.dto import Project
from colstore.database.base import get_db
from colstore.util import generate_id


def _entity_to_dto(entity: ProjectEntity) -> Project:
    return Project(
        project_id=entity.project_id,
        name=entity.name,
        description=entity.description,
        status=entity.status,
        created_at=entity.created_at if entity.created_at else None,
    )


def create_project(name: str, description: Optional[str] = None, status: str = "planning") -> Project:
    with get_db() as session:
        entity = ProjectEntity(project_id=generate_id(), name=name, description=description, status=status)
        session.add(entity)
        session.flush()
        return _entity_to_dto(entity)


def get_project(project_id: str) -> Optional[Project]:
    with get_db() as session:
        row = session.query(ProjectEntity).filter_by(project_id=project_id).first()
        return _entity_to_dto(row) if row else None


def delete_project(project_id: str) -> Optional[Project]:
    """Delete the project row; its columns, phases and tasks go with it through ON DELETE CASCADE."""
    with get_db() as session:
        entity = session.query(ProjectEntity).filter_by(project_id=project_id).first()
        if not entity:
            return None
        project = _entity_to_dto(entity)
        session.delete(entity)
        return project
