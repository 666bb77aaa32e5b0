from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from colstore.entity.dto import ColumnDraft, ColumnType, StandardField
from colstore.errors import SchemaError
from colstore.service import provisioner, schema_registry
from colstore.service.ordering import Direction
from colapi.controller.errors import not_found, to_http

router = APIRouter(prefix="/column")


class CreateColumnRequest(BaseModel):
    project_id: str
    name: str
    type: ColumnType = ColumnType.TEXT
    options: Optional[List[str]] = None
    order: Optional[int] = None
    standard_field: Optional[StandardField] = None
    is_milestone: bool = False


class UpdateColumnRequest(BaseModel):
    column_id: str
    name: Optional[str] = None
    type: Optional[ColumnType] = None
    options: Optional[List[str]] = None
    is_milestone: Optional[bool] = None


class ColumnIdRequest(BaseModel):
    column_id: str


class ReorderRequest(BaseModel):
    project_id: str
    moved: str
    target: str


class MoveRequest(BaseModel):
    project_id: str
    column: str
    direction: Direction


class ProjectIdRequest(BaseModel):
    project_id: str


@router.get("/list")
async def list_columns(project_id: str = Query(...), include_inactive: bool = Query(False)):
    if include_inactive:
        columns = schema_registry.list_all(project_id)
    else:
        columns = schema_registry.list_active(project_id)
    return [c.to_dict() for c in columns]


@router.get("/detail")
async def get_column(column_id: str = Query(...)):
    column = schema_registry.get_column(column_id)
    if not column:
        raise not_found("Column")
    return column.to_dict()


@router.post("")
async def create_column(req: CreateColumnRequest):
    try:
        column = schema_registry.create(ColumnDraft(
            project_id=req.project_id,
            name=req.name,
            type=req.type,
            options=req.options,
            order=req.order,
            standard_field=req.standard_field,
            is_milestone=req.is_milestone,
        ))
    except SchemaError as e:
        raise to_http(e)
    return column.to_dict()


@router.post("/update")
async def update_column(req: UpdateColumnRequest):
    fields = {k: v for k, v in req.model_dump(exclude={"column_id"}).items() if v is not None}
    if not fields:
        raise HTTPException(status_code=400, detail="No fields to update")
    try:
        column = schema_registry.update_column(req.column_id, **fields)
    except SchemaError as e:
        raise to_http(e)
    if not column:
        raise not_found("Column")
    return column.to_dict()


@router.post("/delete")
async def delete_column(req: ColumnIdRequest):
    try:
        column = schema_registry.soft_delete(req.column_id)
    except SchemaError as e:
        raise to_http(e)
    if not column:
        raise not_found("Column")
    return column.to_dict()


@router.post("/toggle-visibility")
async def toggle_visibility(req: ColumnIdRequest):
    try:
        column = schema_registry.toggle_visibility(req.column_id)
    except SchemaError as e:
        raise to_http(e)
    if not column:
        raise not_found("Column")
    return column.to_dict()


def _reorder_response(result):
    return {
        "order": [str(k) for k in result.order],
        "changed": [str(k) for k in result.changed],
        "failed": [str(k) for k in result.failed],
    }


@router.post("/reorder")
async def reorder_columns(req: ReorderRequest):
    try:
        moved = schema_registry.parse_ref(req.moved)
        target = schema_registry.parse_ref(req.target)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    result = schema_registry.reorder_columns(req.project_id, moved, target)
    if result is None:
        raise not_found("Column")
    return _reorder_response(result)


@router.post("/move")
async def move_column(req: MoveRequest):
    try:
        column = schema_registry.parse_ref(req.column)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    result = schema_registry.move_column(req.project_id, column, req.direction)
    if result is None:
        raise not_found("Column")
    return _reorder_response(result)


@router.post("/restore-defaults")
async def restore_defaults(req: ProjectIdRequest):
    try:
        result = provisioner.restore_missing_defaults(req.project_id)
    except SchemaError as e:
        raise to_http(e)
    return {
        "nothing_to_restore": result.nothing_to_restore,
        "created": [c.to_dict() for c in result.created],
    }
