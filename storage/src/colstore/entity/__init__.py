from .project import ProjectEntity
from .column import ColumnEntity
from .phase import PhaseEntity
from .task import TaskEntity

__all__ = ["ProjectEntity", "ColumnEntity", "PhaseEntity", "TaskEntity"]
