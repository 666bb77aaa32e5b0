from typing import Any, Dict

from fastapi import APIRouter, Query
from pydantic import BaseModel

from colstore.errors import SchemaError
from colstore.service import filter_engine
from colstore.service import task as task_service
from colapi.controller.errors import not_found, to_http

router = APIRouter(prefix="/task")


class CreateTaskRequest(BaseModel):
    project_id: str
    name: str


class SetValueRequest(BaseModel):
    task_id: str
    column_id: str
    value: Any


class ClearValueRequest(BaseModel):
    task_id: str
    column_id: str


class FilterTasksRequest(BaseModel):
    project_id: str
    # column_id -> {"text": ...} | {"selected": [...]} | {"min": ..., "max": ...}
    filters: Dict[str, Dict[str, Any]] = {}


@router.post("")
async def create_task(req: CreateTaskRequest):
    try:
        task = task_service.create_task(req.project_id, req.name)
    except SchemaError as e:
        raise to_http(e)
    return task.to_dict()


@router.get("/detail")
async def get_task(task_id: str = Query(...)):
    task = task_service.get_task(task_id)
    if not task:
        raise not_found("Task")
    return task.to_dict()


@router.post("/value")
async def set_value(req: SetValueRequest):
    try:
        value = task_service.set_value(req.task_id, req.column_id, req.value)
    except SchemaError as e:
        raise to_http(e)
    if value is None:
        raise not_found("Task or column")
    return {"task_id": req.task_id, "column_id": req.column_id, "value": value.value}


@router.post("/value/clear")
async def clear_value(req: ClearValueRequest):
    return {"cleared": task_service.clear_value(req.task_id, req.column_id)}


@router.post("/filter")
async def filter_tasks(req: FilterTasksRequest):
    filters = filter_engine.filters_from_dict(req.filters)
    tasks = task_service.filter_tasks(req.project_id, filters)
    return {
        "active_filters": filter_engine.count_active(filters),
        "tasks": [t.to_dict() for t in tasks],
    }
