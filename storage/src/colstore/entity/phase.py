from sqlalchemy import Column, Integer, String, UniqueConstraint
from .base import Base, BaseEntity, ProjectScoped


class PhaseEntity(Base, BaseEntity, ProjectScoped):
    __tablename__ = "phase"

    id = Column(Integer, primary_key=True, autoincrement=True)
    phase_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    order = Column("order", Integer, nullable=False, default=0)
    color = Column(String, nullable=True)

    __table_args__ = (
        UniqueConstraint("phase_id"),
    )
