"""Project service."""

from typing import Optional
from loguru import logger
from colstore.entity.dto import Project
from colstore.repository import project as project_repo
from colstore.service import provisioner
from colstore.service.draft import DraftSchema


def create_project(
    name: str,
    description: Optional[str] = None,
    drafts: Optional[DraftSchema] = None,
) -> Project:
    """Save the project, then its default columns and any drafts after them."""
    project = project_repo.create_project(name, description=description)
    logger.info("Created project {} '{}'", project.project_id, project.name)
    pending = drafts.to_drafts(project.project_id) if drafts else None
    provisioner.on_project_created(project.project_id, pending)
    if drafts:
        drafts.mark_committed()
    return project


def get_project(project_id: str) -> Optional[Project]:
    return project_repo.get_project(project_id)


def delete_project(project_id: str) -> Optional[Project]:
    project = project_repo.delete_project(project_id)
    if project:
        logger.info("Deleted project {} '{}' with its columns, phases and tasks", project_id, project.name)
    return project
