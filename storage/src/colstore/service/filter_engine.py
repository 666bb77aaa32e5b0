"""Type-directed evaluation of task values against per-column filters.

Everything here is a pure function of its inputs. A filter only takes part in
evaluation when it is *meaningfully set*: non-empty text, a non-empty
selection, or at least one range bound. A task passes when it satisfies every
meaningfully set filter, so an empty filter set lets every task through.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from colstore.entity.dto import ColumnType, ProjectColumn

Bound = Union[int, float, str, None]


@dataclass(frozen=True)
class TextFilter:
    text: str = ""

    @property
    def is_set(self) -> bool:
        return bool(self.text)

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class SelectionFilter:
    selected: List[str] = field(default_factory=list)

    @property
    def is_set(self) -> bool:
        return len(self.selected) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {"selected": list(self.selected)}


def _bound_present(bound: Bound) -> bool:
    return bound is not None and bound != ""


@dataclass(frozen=True)
class RangeFilter:
    min: Bound = None
    max: Bound = None

    @property
    def has_min(self) -> bool:
        return _bound_present(self.min)

    @property
    def has_max(self) -> bool:
        return _bound_present(self.max)

    @property
    def is_set(self) -> bool:
        return self.has_min or self.has_max

    def to_dict(self) -> Dict[str, Any]:
        return {"min": self.min, "max": self.max}


FilterValue = Union[TextFilter, SelectionFilter, RangeFilter]
FiltersState = Mapping[str, FilterValue]


def filter_from_dict(data: Mapping[str, Any]) -> FilterValue:
    """Build a filter from its wire shape: ``{text}``, ``{selected}`` or ``{min, max}``."""
    if "selected" in data:
        return SelectionFilter([str(s) for s in (data.get("selected") or [])])
    if "min" in data or "max" in data:
        return RangeFilter(min=data.get("min"), max=data.get("max"))
    return TextFilter(str(data.get("text") or ""))


def filters_from_dict(data: Mapping[str, Mapping[str, Any]]) -> Dict[str, FilterValue]:
    return {column_id: filter_from_dict(value) for column_id, value in data.items()}


def count_active(filters: FiltersState) -> int:
    return sum(1 for f in filters.values() if f.is_set)


def _missing(value: Any) -> bool:
    return value is None or value == ""


def _match_text(value: Any, f: TextFilter) -> bool:
    haystack = "" if value is None else str(value)
    return f.text.lower() in haystack.lower()


def _match_selection(value: Any, f: SelectionFilter) -> bool:
    if _missing(value):
        return False
    return str(value) in f.selected


def _to_float(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _match_numeric(value: Any, f: RangeFilter) -> bool:
    number = None if _missing(value) else _to_float(value)
    if number is None:
        return False
    if f.has_min:
        low = _to_float(f.min)
        if low is not None and number < low:
            return False
    if f.has_max:
        high = _to_float(f.max)
        if high is not None and number > high:
            return False
    return True


def _match_date(value: Any, f: RangeFilter) -> bool:
    if _missing(value):
        return False
    # ISO-8601 dates sort lexically in chronological order
    text = str(value)
    if f.has_min and text < str(f.min):
        return False
    if f.has_max and text > str(f.max):
        return False
    return True


def _matches(column: ProjectColumn, value: Any, f: FilterValue) -> bool:
    column_type = column.type
    if column_type is ColumnType.TEXT:
        return _match_text(value, f) if isinstance(f, TextFilter) else True
    if column_type in (ColumnType.LIST, ColumnType.USER):
        return _match_selection(value, f) if isinstance(f, SelectionFilter) else True
    if column_type in (ColumnType.NUMBER, ColumnType.PERCENTAGE):
        return _match_numeric(value, f) if isinstance(f, RangeFilter) else True
    if column_type is ColumnType.DATE:
        return _match_date(value, f) if isinstance(f, RangeFilter) else True
    raise ValueError(f"Unhandled column type: {column_type}")


def evaluate(values: Mapping[str, Any], filters: FiltersState, columns: Iterable[ProjectColumn]) -> bool:
    """Whether a task's value map passes every meaningfully set filter.

    Filters on columns missing from ``columns`` are ignored, as are filters
    whose shape does not apply to the column's type.
    """
    by_id = {c.column_id: c for c in columns}
    for column_id, f in filters.items():
        if not f.is_set:
            continue
        column = by_id.get(column_id)
        if column is None:
            continue
        if not _matches(column, values.get(column_id), f):
            return False
    return True
