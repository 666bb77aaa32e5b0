from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from colstore.errors import SchemaError
from colstore.service import phase as phase_service
from colstore.service.ordering import Direction
from colapi.controller.errors import not_found, to_http

router = APIRouter(prefix="/phase")


class CreatePhaseRequest(BaseModel):
    project_id: str
    name: str
    color: Optional[str] = None


class UpdatePhaseRequest(BaseModel):
    phase_id: str
    name: Optional[str] = None
    color: Optional[str] = None


class PhaseIdRequest(BaseModel):
    phase_id: str


class ReorderPhaseRequest(BaseModel):
    project_id: str
    moved: str
    target: str


class MovePhaseRequest(BaseModel):
    project_id: str
    phase_id: str
    direction: Direction


@router.get("/list")
async def list_phases(project_id: str = Query(...)):
    return [p.to_dict() for p in phase_service.list_phases(project_id)]


@router.post("")
async def create_phase(req: CreatePhaseRequest):
    try:
        phase = phase_service.create_phase(req.project_id, req.name, color=req.color)
    except SchemaError as e:
        raise to_http(e)
    return phase.to_dict()


@router.post("/update")
async def update_phase(req: UpdatePhaseRequest):
    fields = {k: v for k, v in req.model_dump(exclude={"phase_id"}).items() if v is not None}
    if not fields:
        raise HTTPException(status_code=400, detail="No fields to update")
    phase = phase_service.update_phase(req.phase_id, **fields)
    if not phase:
        raise not_found("Phase")
    return phase.to_dict()


@router.post("/delete")
async def delete_phase(req: PhaseIdRequest):
    phase = phase_service.delete_phase(req.phase_id)
    if not phase:
        raise not_found("Phase")
    return phase.to_dict()


@router.post("/reorder")
async def reorder_phases(req: ReorderPhaseRequest):
    result = phase_service.reorder_phases(req.project_id, req.moved, req.target)
    if result is None:
        raise not_found("Phase")
    return {"order": result.order, "failed": result.failed}


@router.post("/move")
async def move_phase(req: MovePhaseRequest):
    result = phase_service.move_phase(req.project_id, req.phase_id, req.direction)
    if result is None:
        raise not_found("Phase")
    return {"order": result.order, "failed": result.failed}
