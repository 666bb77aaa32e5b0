"""Plain dataclasses passed between repositories, services and callers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class ColumnType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    PERCENTAGE = "percentage"
    LIST = "list"
    USER = "user"


class StandardField(str, Enum):
    NAME = "name"
    DESCRIPTION = "description"
    RESPONSIBLE = "responsible"
    STATUS = "status"
    PRIORITY = "priority"
    START_DATE = "startDate"
    END_DATE = "endDate"
    PROGRESS = "progress"


class ColumnState(str, Enum):
    DRAFT = "draft"
    COMMITTED = "committed"


@dataclass(frozen=True)
class StandardIdentity:
    field: StandardField

    def __str__(self) -> str:
        return f"standard:{self.field.value}"


@dataclass(frozen=True)
class CustomIdentity:
    column_id: str

    def __str__(self) -> str:
        return f"custom:{self.column_id}"


# Standard and custom columns share one ordering key space
ColumnIdentity = Union[StandardIdentity, CustomIdentity]


@dataclass
class ColumnDraft:
    project_id: Optional[str]
    name: str
    type: ColumnType = ColumnType.TEXT
    options: Optional[List[str]] = None
    order: Optional[int] = None
    standard_field: Optional[StandardField] = None
    is_milestone: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColumnDraft":
        standard_field = data.get("standard_field")
        return cls(
            project_id=data.get("project_id"),
            name=data["name"],
            type=ColumnType(data.get("type") or ColumnType.TEXT),
            options=list(data["options"]) if data.get("options") is not None else None,
            order=data.get("order"),
            standard_field=StandardField(standard_field) if standard_field else None,
            is_milestone=bool(data.get("is_milestone", False)),
        )


@dataclass
class ProjectColumn:
    column_id: str
    project_id: str
    name: str
    type: ColumnType
    order: int
    options: Optional[List[str]] = None
    standard_field: Optional[StandardField] = None
    is_milestone: bool = False
    active: bool = True
    hidden: bool = False
    state: ColumnState = ColumnState.COMMITTED
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def identity(self) -> ColumnIdentity:
        if self.standard_field is not None:
            return StandardIdentity(self.standard_field)
        return CustomIdentity(self.column_id)

    @property
    def is_protected(self) -> bool:
        return self.standard_field is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column_id": self.column_id,
            "project_id": self.project_id,
            "name": self.name,
            "type": self.type.value,
            "order": self.order,
            "options": list(self.options) if self.options is not None else None,
            "standard_field": self.standard_field.value if self.standard_field else None,
            "is_milestone": self.is_milestone,
            "active": self.active,
            "hidden": self.hidden,
            "state": self.state.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class Project:
    project_id: str
    name: str
    description: Optional[str] = None
    status: str = "planning"
    created_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "name": self.name,
            "description": self.description,
            "status": self.status,
            "created_at": self.created_at,
        }


@dataclass
class Phase:
    phase_id: str
    project_id: str
    name: str
    order: int
    color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase_id": self.phase_id,
            "project_id": self.project_id,
            "name": self.name,
            "order": self.order,
            "color": self.color,
        }


@dataclass
class Task:
    task_id: str
    project_id: str
    name: str
    custom_values: Dict[str, Any] = field(default_factory=dict)
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "task_id": self.task_id,
            "project_id": self.project_id,
            "name": self.name,
            "custom_values": dict(self.custom_values),
            "updated_at": self.updated_at,
        }
