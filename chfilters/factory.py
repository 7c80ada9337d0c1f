"""Convenience constructors for the common filter conditions."""

from __future__ import annotations

from collections.abc import Iterable

from chfilters.conditions import ValueCondition, ValueType
from chfilters.operators import ColumnTypeInfo, FilterOperator
from chfilters.special_conditions import (
    ArrayContainsCondition,
    ArrayHasCondition,
    DateRangeCondition,
    DateRangeType,
    InValuesCondition,
    JsonValueCondition,
)


def string(
    column: str, operator: FilterOperator, value: str | None = None
) -> ValueCondition:
    """Condition on a String column."""
    return ValueCondition(column, operator, value, ValueType.STRING)


def fixed_string(
    column: str, operator: FilterOperator, value: str | None = None
) -> ValueCondition:
    """Condition on a FixedString column."""
    return ValueCondition(column, operator, value, ValueType.FIXED_STRING)


def uint8(
    column: str, operator: FilterOperator, value: int | None = None
) -> ValueCondition:
    """Condition on a UInt8 column."""
    return ValueCondition(column, operator, value, ValueType.UINT8)


def uint32(
    column: str, operator: FilterOperator, value: int | None = None
) -> ValueCondition:
    """Condition on a UInt32 column."""
    return ValueCondition(column, operator, value, ValueType.UINT32)


def int32(
    column: str, operator: FilterOperator, value: int | None = None
) -> ValueCondition:
    """Condition on an Int32 column."""
    return ValueCondition(column, operator, value, ValueType.INT32)


def int64(
    column: str, operator: FilterOperator, value: int | None = None
) -> ValueCondition:
    """Condition on an Int64 column."""
    return ValueCondition(column, operator, value, ValueType.INT64)


def float64(
    column: str, operator: FilterOperator, value: float | None = None
) -> ValueCondition:
    """Condition on a Float64 column."""
    return ValueCondition(column, operator, value, ValueType.FLOAT64)


def date(
    column: str, operator: FilterOperator, value: str | None = None
) -> ValueCondition:
    """Condition on a Date column."""
    return ValueCondition(column, operator, value, ValueType.DATE)


def date_time(
    column: str, operator: FilterOperator, value: str | None = None
) -> ValueCondition:
    """Condition on a DateTime column."""
    return ValueCondition(column, operator, value, ValueType.DATETIME)


def boolean(
    column: str, operator: FilterOperator, value: bool | None = None
) -> ValueCondition:
    """Condition on a boolean column."""
    return ValueCondition(column, operator, value, ValueType.BOOLEAN)


def uuid(
    column: str, operator: FilterOperator, value: str | None = None
) -> ValueCondition:
    """Condition on a UUID column."""
    return ValueCondition(column, operator, value, ValueType.UUID)


def json(
    column: str,
    operator: FilterOperator,
    value: str | None = None,
    path: str | None = None,
) -> JsonValueCondition:
    """Condition on a JSON column, optionally on the string at ``path``."""
    return JsonValueCondition(column, operator, value, path)


def array_contains(column: str, values: str) -> ArrayContainsCondition:
    """True when the array holds all of the comma-separated ``values``."""
    return ArrayContainsCondition(column, values)


def array_has(column: str, value: str) -> ArrayHasCondition:
    """True when the array holds ``value``."""
    return ArrayHasCondition(column, value)


def date_exact(column: str, timestamp: str) -> DateRangeCondition:
    """Match an exact timestamp."""
    return DateRangeCondition(column, DateRangeType.EXACT, timestamp)


def date_only(column: str, date: str) -> DateRangeCondition:
    """Match every moment of the given day."""
    return DateRangeCondition(column, DateRangeType.DATE_ONLY, date)


def date_range(column: str, start: str, end: str) -> DateRangeCondition:
    """Match values between ``start`` and ``end``, both included."""
    return DateRangeCondition(column, DateRangeType.RANGE, start, end)


def relative_date(column: str, expr: str) -> DateRangeCondition:
    """Match values later than a SQL expression such as ``now() - INTERVAL 1 DAY``."""
    return DateRangeCondition(column, DateRangeType.RELATIVE, expr)


def in_values(
    column: str,
    operator: FilterOperator,
    values: Iterable[str],
    column_type: ColumnTypeInfo | None = None,
) -> InValuesCondition:
    """IN / NOT IN against an explicit list, quoted according to ``column_type``."""
    return InValuesCondition(column, operator, tuple(values), column_type)