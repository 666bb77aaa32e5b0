"""Phase service; phases share the column ordering semantics."""

from typing import Hashable, List, Optional

from loguru import logger

from colstore.entity.dto import Phase
from colstore.errors import ProjectNotFoundError
from colstore.repository import project as project_repo
from colstore.repository import phase as phase_repo
from colstore.service import ordering
from colstore.service.ordering import Direction, OrderedItem, OrderingBackend, ReorderResult


class PhaseOrdering(OrderingBackend):
    def list_items(self, collection_id: str) -> List[OrderedItem]:
        return [OrderedItem(key=p.phase_id, order=p.order, tiebreak=p.phase_id) for p in phase_repo.list_phases(collection_id)]

    def set_order(self, collection_id: str, key: Hashable, order: int) -> None:
        phase_repo.update_phase(key, order=order)


def list_phases(project_id: str) -> List[Phase]:
    return phase_repo.list_phases(project_id)


def get_phase(phase_id: str) -> Optional[Phase]:
    return phase_repo.get_phase(phase_id)


def create_phase(project_id: str, name: str, color: Optional[str] = None) -> Phase:
    if not project_repo.get_project(project_id):
        raise ProjectNotFoundError(project_id)
    order = max((p.order for p in phase_repo.list_phases(project_id)), default=0) + 1
    return phase_repo.create_phase(project_id, name, order, color=color)


def update_phase(phase_id: str, **fields) -> Optional[Phase]:
    fields = {k: v for k, v in fields.items() if k in ("name", "color")}
    if not fields:
        return phase_repo.get_phase(phase_id)
    return phase_repo.update_phase(phase_id, **fields)


def delete_phase(phase_id: str) -> Optional[Phase]:
    """Remove a phase; the remaining phases keep their relative order."""
    phase = phase_repo.delete_phase(phase_id)
    if phase:
        logger.info("Deleted phase {} '{}' from project {}", phase_id, phase.name, phase.project_id)
    return phase


def reorder_phases(project_id: str, moved_id: str, target_id: str) -> Optional[ReorderResult]:
    return ordering.reorder(PhaseOrdering(), project_id, moved_id, target_id)


def move_phase(project_id: str, phase_id: str, direction: Direction) -> Optional[ReorderResult]:
    return ordering.move_adjacent(PhaseOrdering(), project_id, phase_id, direction)
