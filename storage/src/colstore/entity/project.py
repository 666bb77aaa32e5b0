from sqlalchemy import Column, Integer, String, Text
from .base import Base, BaseEntity


class ProjectEntity(Base, BaseEntity):
    __tablename__ = "project"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="planning")
