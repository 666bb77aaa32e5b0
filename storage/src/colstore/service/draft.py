"""Columns edited before their project exists.

A :class:`DraftSchema` holds unsaved columns under temporary ids. Drafts can be
renamed, retyped, removed and reordered freely; nothing is written until the
owning project is durable and the schema is committed through
:func:`colstore.service.project.create_project`, which appends the drafts after
the default columns in their current relative order.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional

from colstore.entity.dto import ColumnDraft, ColumnState, ColumnType
from colstore.errors import DraftCommittedError, SchemaError
from colstore.service import ordering
from colstore.service.ordering import Direction, OrderedItem, OrderingBackend, ReorderResult
from colstore.util import generate_id

DRAFT_COLLECTION = "draft"


@dataclass
class DraftColumn:
    temp_id: str
    name: str
    type: ColumnType
    order: int
    options: Optional[List[str]] = None
    is_milestone: bool = False
    state: ColumnState = ColumnState.DRAFT

    def to_dict(self):
        return {
            "temp_id": self.temp_id,
            "name": self.name,
            "type": self.type.value,
            "order": self.order,
            "options": list(self.options) if self.options is not None else None,
            "is_milestone": self.is_milestone,
            "state": self.state.value,
        }


class DraftSchema(OrderingBackend):
    def __init__(self):
        self._columns: Dict[str, DraftColumn] = {}
        self.state = ColumnState.DRAFT

    def _check_editable(self) -> None:
        if self.state is ColumnState.COMMITTED:
            raise DraftCommittedError("Draft columns were already saved with their project")

    def _get(self, temp_id: str) -> DraftColumn:
        try:
            return self._columns[temp_id]
        except KeyError:
            raise SchemaError(f"Draft column '{temp_id}' not found") from None

    def list_items(self, collection_id: str) -> List[OrderedItem]:
        return [OrderedItem(key=c.temp_id, order=c.order, tiebreak=c.temp_id) for c in self._columns.values()]

    def set_order(self, collection_id: str, key: Hashable, order: int) -> None:
        self._columns[key].order = order

    def columns(self) -> List[DraftColumn]:
        return sorted(self._columns.values(), key=lambda c: (c.order, c.temp_id))

    def add(
        self,
        name: str,
        type: ColumnType = ColumnType.TEXT,
        options: Optional[List[str]] = None,
        is_milestone: bool = False,
    ) -> DraftColumn:
        self._check_editable()
        order = max((c.order for c in self._columns.values()), default=0) + 1
        column = DraftColumn(
            temp_id=generate_id(),
            name=name,
            type=ColumnType(type),
            order=order,
            options=list(options) if options is not None else None,
            is_milestone=is_milestone,
        )
        self._columns[column.temp_id] = column
        return column

    def update(self, temp_id: str, **fields) -> DraftColumn:
        """Change any draft field, the type included."""
        self._check_editable()
        column = self._get(temp_id)
        for key, value in fields.items():
            if key == "type":
                value = ColumnType(value)
            elif key not in ("name", "options", "is_milestone"):
                raise SchemaError(f"Cannot update draft field '{key}'")
            setattr(column, key, value)
        return column

    def remove(self, temp_id: str) -> bool:
        self._check_editable()
        return self._columns.pop(temp_id, None) is not None

    def reorder(self, moved_id: str, target_id: str) -> Optional[ReorderResult]:
        self._check_editable()
        return ordering.reorder(self, DRAFT_COLLECTION, moved_id, target_id)

    def move(self, temp_id: str, direction: Direction) -> Optional[ReorderResult]:
        self._check_editable()
        return ordering.move_adjacent(self, DRAFT_COLLECTION, temp_id, direction)

    def to_drafts(self, project_id: str) -> List[ColumnDraft]:
        return [
            ColumnDraft(
                project_id=project_id,
                name=c.name,
                type=c.type,
                options=c.options,
                is_milestone=c.is_milestone,
            )
            for c in self.columns()
        ]

    def mark_committed(self) -> None:
        self.state = ColumnState.COMMITTED
        for column in self._columns.values():
            column.state = ColumnState.COMMITTED
