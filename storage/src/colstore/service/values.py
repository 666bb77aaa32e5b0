"""Typed cell values, one variant per column type.

Values are stored as plain JSON in the task's ``custom_values`` map and are
lifted into a :data:`CellValue` variant by the owning column's type whenever
they are written or read.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, Optional, Union

from dateutil.parser import isoparse

from colstore.entity.dto import ColumnType, ProjectColumn
from colstore.errors import InvalidValueError


@dataclass(frozen=True)
class TextValue:
    value: str


@dataclass(frozen=True)
class NumberValue:
    value: Union[int, float]


@dataclass(frozen=True)
class DateValue:
    value: str  # YYYY-MM-DD


@dataclass(frozen=True)
class PercentageValue:
    value: int


@dataclass(frozen=True)
class ListValue:
    value: str


@dataclass(frozen=True)
class UserRefValue:
    value: str


CellValue = Union[TextValue, NumberValue, DateValue, PercentageValue, ListValue, UserRefValue]


def _to_number(raw: Any) -> Union[int, float]:
    if isinstance(raw, bool):
        raise InvalidValueError(f"Expected a number, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        number = raw
    else:
        text = str(raw).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise InvalidValueError(f"Expected a number, got {raw!r}") from None
    if not math.isfinite(number):
        raise InvalidValueError(f"Expected a finite number, got {raw!r}")
    return number


def _text(raw: Any) -> TextValue:
    return TextValue("" if raw is None else str(raw))


def _number(raw: Any) -> NumberValue:
    return NumberValue(_to_number(raw))


def _date(raw: Any) -> DateValue:
    if isinstance(raw, datetime):
        return DateValue(raw.date().isoformat())
    if isinstance(raw, date):
        return DateValue(raw.isoformat())
    try:
        return DateValue(isoparse(str(raw).strip()).date().isoformat())
    except ValueError:
        raise InvalidValueError(f"Expected an ISO-8601 date, got {raw!r}") from None


def _percentage(raw: Any) -> PercentageValue:
    return PercentageValue(min(100, max(0, int(round(_to_number(raw))))))


def _list(raw: Any) -> ListValue:
    # Membership in the column's options is not enforced on write
    return ListValue(str(raw))


def _user(raw: Any) -> UserRefValue:
    text = str(raw).strip()
    if not text:
        raise InvalidValueError("Expected a person id, got an empty string")
    return UserRefValue(text)


_COERCERS: Dict[ColumnType, Callable[[Any], CellValue]] = {
    ColumnType.TEXT: _text,
    ColumnType.NUMBER: _number,
    ColumnType.DATE: _date,
    ColumnType.PERCENTAGE: _percentage,
    ColumnType.LIST: _list,
    ColumnType.USER: _user,
}


def coerce(column_type: ColumnType, raw: Any) -> CellValue:
    """Build the variant for ``column_type`` from user input."""
    return _COERCERS[ColumnType(column_type)](raw)


def to_storage(value: CellValue) -> Any:
    return value.value


def from_storage(column: ProjectColumn, raw: Any) -> Optional[CellValue]:
    """Read a stored value back as its variant; ``None`` means no value."""
    if raw is None:
        return None
    try:
        return coerce(column.type, raw)
    except InvalidValueError:
        # Values written before a type was settled fall back to text
        return TextValue(str(raw))


def display(value: Optional[CellValue]) -> str:
    if value is None:
        return "-"
    if isinstance(value, PercentageValue):
        return f"{value.value}%"
    return str(value.value)
