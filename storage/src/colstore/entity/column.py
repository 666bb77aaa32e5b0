from sqlalchemy import Column, Integer, String, Boolean, JSON, UniqueConstraint
from .base import Base, BaseEntity, ProjectScoped


class ColumnEntity(Base, BaseEntity, ProjectScoped):
    __tablename__ = "custom_column"

    id = Column(Integer, primary_key=True, autoincrement=True)
    column_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    options = Column(JSON, nullable=True)
    order = Column("order", Integer, nullable=False, default=0)
    standard_field = Column(String, nullable=True)
    is_milestone = Column(Boolean, nullable=False, default=False)
    active = Column(Boolean, nullable=False, default=True)
    hidden = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("column_id"),
    )
