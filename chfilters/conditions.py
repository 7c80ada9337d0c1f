"""Single-column filter conditions rendered to ClickHouse SQL."""

from __future__ import annotations

import abc
import enum
import math
import struct
from dataclasses import dataclass
from decimal import Decimal

from chfilters.operators import FilterOperator


class FilterError(ValueError):
    """Raised when a filter cannot be rendered to SQL."""


def escape_string(value: str) -> str:
    """Double single quotes so a value can sit inside a SQL string literal."""
    return value.replace("'", "''")


class FilterCondition(abc.ABC):
    """A single comparison that renders to a SQL boolean expression."""

    @abc.abstractmethod
    def to_sql(self, case_insensitive: bool = False) -> str:
        """Render the condition as SQL."""

    def __str__(self) -> str:
        try:
            return self.to_sql(False)
        except FilterError as err:
            return f"Error: {err}"


class ValueType(enum.Enum):
    """ClickHouse type of the column a value condition compares against."""

    STRING = "String"
    FIXED_STRING = "FixedString"
    UINT8 = "UInt8"
    UINT16 = "UInt16"
    UINT32 = "UInt32"
    UINT64 = "UInt64"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    DATE = "Date"
    DATETIME = "DateTime"
    DATETIME64 = "DateTime64"
    BOOLEAN = "Boolean"
    UUID = "UUID"


_STRING_TYPES = frozenset({ValueType.STRING, ValueType.FIXED_STRING})
_INTEGER_BOUNDS = {
    ValueType.UINT8: (0, 2**8 - 1),
    ValueType.UINT16: (0, 2**16 - 1),
    ValueType.UINT32: (0, 2**32 - 1),
    ValueType.UINT64: (0, 2**64 - 1),
    ValueType.INT8: (-(2**7), 2**7 - 1),
    ValueType.INT16: (-(2**15), 2**15 - 1),
    ValueType.INT32: (-(2**31), 2**31 - 1),
    ValueType.INT64: (-(2**63), 2**63 - 1),
}
_FLOAT_TYPES = frozenset({ValueType.FLOAT32, ValueType.FLOAT64})
_TEMPORAL_TYPES = frozenset({ValueType.DATE, ValueType.DATETIME, ValueType.DATETIME64})
_TEXT_TYPES = _STRING_TYPES | _TEMPORAL_TYPES | {ValueType.UUID}

_COMPARISONS = frozenset(
    {
        FilterOperator.EQUAL,
        FilterOperator.NOT_EQUAL,
        FilterOperator.GREATER_THAN,
        FilterOperator.GREATER_THAN_OR_EQUAL,
        FilterOperator.LESS_THAN,
        FilterOperator.LESS_THAN_OR_EQUAL,
    }
)
_EQUALITY = frozenset({FilterOperator.EQUAL, FilterOperator.NOT_EQUAL})
_MEMBERSHIP = frozenset({FilterOperator.IN, FilterOperator.NOT_IN})
_NULL_CHECKS = frozenset({FilterOperator.IS_NULL, FilterOperator.IS_NOT_NULL})

_FLOAT32_MAX = 3.4028234663852886e38


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _format_float(value: float, single: bool) -> str:
    """Shortest round-trip decimal form of a float, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if single:
        target = _to_float32(value)
        text = next(
            candidate
            for candidate in (f"{target:.{digits}g}" for digits in range(1, 18))
            if _to_float32(float(candidate)) == target
        )
    else:
        text = repr(value)
    number = Decimal(text)
    if number == number.to_integral_value():
        return str(int(number))
    return format(number, "f")


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",")]


@dataclass(frozen=True)
class ValueCondition(FilterCondition):
    """Compare one column against an optional scalar value of a given type."""

    column: str
    operator: FilterOperator
    value: object = None
    value_type: ValueType = ValueType.STRING

    def __post_init__(self) -> None:
        value, kind = self.value, self.value_type
        if value is None:
            return
        if kind in _TEXT_TYPES:
            if not isinstance(value, str):
                raise TypeError(f"{kind.value} condition needs a str value")
        elif kind in _INTEGER_BOUNDS:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{kind.value} condition needs an int value")
            low, high = _INTEGER_BOUNDS[kind]
            if not low <= value <= high:
                raise FilterError(f"value {value} out of range for {kind.value}")
        elif kind in _FLOAT_TYPES:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{kind.value} condition needs a float value")
            if (
                kind is ValueType.FLOAT32
                and math.isfinite(value)
                and abs(value) > _FLOAT32_MAX
            ):
                raise FilterError(f"value {value} out of range for {kind.value}")
        elif kind is ValueType.BOOLEAN and not isinstance(value, bool):
            raise TypeError("Boolean condition needs a bool value")

    def to_sql(self, case_insensitive: bool = False) -> str:
        """Render the condition; raise FilterError for unsupported operators."""
        kind = self.value_type
        if kind in _STRING_TYPES:
            return self._string_sql(case_insensitive)
        if self.operator in _NULL_CHECKS:
            return f"{self.column} {self.operator.as_sql()}"
        if kind in _INTEGER_BOUNDS:
            return self._integer_sql()
        if kind in _FLOAT_TYPES:
            return self._float_sql()
        if kind in _TEMPORAL_TYPES:
            return self._temporal_sql()
        if kind is ValueType.BOOLEAN:
            return self._boolean_sql()
        return self._uuid_sql()

    def _bare(self) -> str:
        return f"{self.column} {self.operator.as_sql()}"

    def _missing_values(self) -> FilterError:
        return FilterError(f"{self.operator.as_sql()} operator requires values")

    def _string_sql(self, case_insensitive: bool) -> str:
        op, column, value = self.operator, self.column, self.value
        if op in _EQUALITY or op in (FilterOperator.LIKE, FilterOperator.NOT_LIKE):
            if value is None:
                return self._bare()
            if case_insensitive:
                return f"lower({column}) {op.as_sql()} lower('{escape_string(value)}')"
            return f"{column} {op.as_sql()} '{escape_string(value)}'"
        if op in (FilterOperator.STARTS_WITH, FilterOperator.ENDS_WITH):
            if value is None:
                return f"{column} LIKE '%'"
            pattern = op.format_value(escape_string(value))
            if case_insensitive:
                return f"lower({column}) LIKE lower('{pattern}')"
            return f"{column} LIKE '{pattern}'"
        if op in _MEMBERSHIP:
            if value is None:
                raise self._missing_values()
            items = [escape_string(item) for item in _split_list(value)]
            if case_insensitive:
                listed = ", ".join(f"lower('{item}')" for item in items)
                return f"lower({column}) {op.as_sql()} ({listed})"
            listed = ", ".join(f"'{item}'" for item in items)
            return f"{column} {op.as_sql()} ({listed})"
        if op in _NULL_CHECKS:
            return self._bare()
        raise FilterError("Unsupported operator for string type")

    def _integer_sql(self) -> str:
        op, value = self.operator, self.value
        if op in _COMPARISONS:
            return self._bare() if value is None else f"{self._bare()} {value}"
        if op in _MEMBERSHIP:
            if value is None:
                raise self._missing_values()
            return f"{self._bare()} ({', '.join(_split_list(str(value)))})"
        raise FilterError("Unsupported operator for integer type")

    def _float_sql(self) -> str:
        if self.operator in _COMPARISONS:
            if self.value is None:
                return self._bare()
            text = _format_float(
                float(self.value), self.value_type is ValueType.FLOAT32
            )
            return f"{self._bare()} {text}"
        raise FilterError("Unsupported operator for float type")

    def _temporal_sql(self) -> str:
        if self.operator in _COMPARISONS:
            if self.value is None:
                return self._bare()
            return f"{self._bare()} '{self.value}'"
        raise FilterError("Unsupported operator for date/time type")

    def _boolean_sql(self) -> str:
        if self.operator in _EQUALITY:
            if self.value is None:
                return self._bare()
            return f"{self._bare()} {1 if self.value else 0}"
        raise FilterError("Unsupported operator for boolean type")

    def _uuid_sql(self) -> str:
        op, value = self.operator, self.value
        if op in _EQUALITY:
            return self._bare() if value is None else f"{self._bare()} '{value}'"
        if op in _MEMBERSHIP:
            if value is None:
                raise self._missing_values()
            listed = ", ".join(f"'{item}'" for item in _split_list(value))
            return f"{self._bare()} ({listed})"
        raise FilterError("Unsupported operator for UUID type")