"""Function-based phase repository using SQLAlchemy sessions."""

from typing import List, Optional
from colstore.entity.phase import PhaseEntity
from colstore.entity.dto import Phase
from colstore.database.base import get_db
from colstore.util import generate_id


def _entity_to_dto(entity: PhaseEntity) -> Phase:
    return Phase(
        phase_id=entity.phase_id,
        project_id=entity.project_id,
        name=entity.name,
        order=entity.order,
        color=entity.color,
    )


def create_phase(project_id: str, name: str, order: int, color: Optional[str] = None) -> Phase:
    with get_db() as session:
        entity = PhaseEntity(phase_id=generate_id(), project_id=project_id, name=name, order=order, color=color)
        session.add(entity)
        session.flush()
        return _entity_to_dto(entity)


def update_phase(phase_id: str, **fields) -> Optional[Phase]:
    with get_db() as session:
        entity = session.query(PhaseEntity).filter_by(phase_id=phase_id).first()
        if not entity:
            return None
        for k, v in fields.items():
            if k not in ("name", "order", "color"):
                raise ValueError(f"Unknown phase field: {k}")
            setattr(entity, k, v)
        session.flush()
        return _entity_to_dto(entity)


def get_phase(phase_id: str) -> Optional[Phase]:
    with get_db() as session:
        row = session.query(PhaseEntity).filter_by(phase_id=phase_id).first()
        return _entity_to_dto(row) if row else None


def list_phases(project_id: str) -> List[Phase]:
    with get_db() as session:
        rows = (
            session.query(PhaseEntity)
            .filter_by(project_id=project_id)
            .order_by(PhaseEntity.order.asc(), PhaseEntity.phase_id.asc())
            .all()
        )
        return [_entity_to_dto(r) for r in rows]


def delete_phase(phase_id: str) -> Optional[Phase]:
    with get_db() as session:
        entity = session.query(PhaseEntity).filter_by(phase_id=phase_id).first()
        if not entity:
            return None
        phase = _entity_to_dto(entity)
        session.delete(entity)
        return phase
