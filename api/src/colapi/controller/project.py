from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from colstore.entity.dto import ColumnType
from colstore.service import project as project_service
from colstore.service import schema_registry
from colstore.service.draft import DraftSchema
from colapi.controller.errors import not_found

router = APIRouter(prefix="/project")


class PendingColumn(BaseModel):
    name: str
    type: ColumnType = ColumnType.TEXT
    options: Optional[List[str]] = None
    is_milestone: bool = False


class CreateProjectRequest(BaseModel):
    name: str
    description: Optional[str] = None
    # Unsaved columns in the order the user arranged them
    columns: List[PendingColumn] = []


class ProjectIdRequest(BaseModel):
    project_id: str


@router.post("")
async def create_project(req: CreateProjectRequest):
    drafts = DraftSchema()
    for col in req.columns:
        drafts.add(col.name, col.type, options=col.options, is_milestone=col.is_milestone)
    project = project_service.create_project(req.name, description=req.description, drafts=drafts)
    result = project.to_dict()
    result["columns"] = [c.to_dict() for c in schema_registry.list_active(project.project_id)]
    return result


@router.get("/detail")
async def get_project(project_id: str = Query(...)):
    project = project_service.get_project(project_id)
    if not project:
        raise not_found("Project")
    return project.to_dict()


@router.post("/delete")
async def delete_project(req: ProjectIdRequest):
    project = project_service.delete_project(req.project_id)
    if not project:
        raise not_found("Project")
    return project.to_dict()
