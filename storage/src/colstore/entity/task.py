from sqlalchemy import Column, Integer, String, JSON, UniqueConstraint
from .base import Base, BaseEntity, ProjectScoped


class TaskEntity(Base, BaseEntity, ProjectScoped):
    __tablename__ = "task"

    id = Column(Integer, primary_key=True, autoincrement=True)
    task_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    # column_id -> raw stored value; a missing key means "no value"
    custom_values = Column(JSON, nullable=False, default=dict)

    __table_args__ = (
        UniqueConstraint("task_id"),
    )
