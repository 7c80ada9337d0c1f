"""Date range, IN-list, array and JSON filter conditions."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from chfilters.conditions import FilterCondition, FilterError, escape_string
from chfilters.operators import ColumnTypeInfo, FilterOperator

# Accepts the same spellings as a strict decimal float parser: optional sign,
# digits with an optional fraction and exponent, or inf/infinity/nan.
_NUMBER = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE | re.ASCII,
)


def _is_number(text: str) -> bool:
    return _NUMBER.fullmatch(text) is not None


class DateRangeType(enum.Enum):
    """How a date range condition matches its column."""

    EXACT = "exact"
    DATE_ONLY = "date_only"
    RANGE = "range"
    RELATIVE = "relative"


@dataclass(frozen=True)
class DateRangeCondition(FilterCondition):
    """Match a date column exactly, by day, within a range or against an expression.

    For ``RANGE`` the ``value`` is the start and ``end`` the end of the range;
    every other kind takes ``value`` alone.
    """

    column: str
    range_type: DateRangeType
    value: str
    end: str | None = None

    def __post_init__(self) -> None:
        if self.range_type is DateRangeType.RANGE:
            if self.end is None:
                raise FilterError("date range needs an end value")
        elif self.end is not None:
            raise FilterError(f"{self.range_type.value} date filter takes no end value")

    def to_sql(self, case_insensitive: bool = False) -> str:
        """Render the condition; case sensitivity does not apply to dates."""
        column, value = self.column, self.value
        kind = self.range_type
        if kind is DateRangeType.EXACT:
            return f"{column} = '{value}'"
        if kind is DateRangeType.DATE_ONLY:
            return f"toDate({column}) = toDate('{value}')"
        if kind is DateRangeType.RANGE:
            return f"{column} BETWEEN '{value}' AND '{self.end}'"
        return f"{column} > {value}"


@dataclass(frozen=True)
class InValuesCondition(FilterCondition):
    """IN / NOT IN against an explicit list of values, quoted by column type."""

    column: str
    operator: FilterOperator
    values: tuple[str, ...]
    column_type: ColumnTypeInfo | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def to_sql(self, case_insensitive: bool = False) -> str:
        """Render the condition; raise FilterError unless the operator is IN or NOT IN."""
        is_text = self.column_type is ColumnTypeInfo.STRING
        if is_text:
            template = "lower('{}')" if case_insensitive else "'{}'"
            listed = ", ".join(template.format(escape_string(v)) for v in self.values)
        else:
            listed = ", ".join(
                v if _is_number(v) else f"'{escape_string(v)}'" for v in self.values
            )
        column = f"lower({self.column})" if case_insensitive and is_text else self.column
        if self.operator in (FilterOperator.IN, FilterOperator.NOT_IN):
            return f"{column} {self.operator.as_sql()} ({listed})"
        raise FilterError("Invalid operator for InValues condition")


@dataclass(frozen=True)
class ArrayContainsCondition(FilterCondition):
    """True when the array column holds every one of a comma-separated list of values."""

    column: str
    value: str
    operator: FilterOperator = field(default=FilterOperator.ARRAY_CONTAINS)

    def to_sql(self, case_insensitive: bool = False) -> str:
        """Render as a ``hasAll`` call."""
        listed = ", ".join(
            f"'{escape_string(item.strip())}'" for item in self.value.split(",")
        )
        return f"hasAll({self.column}, array[{listed}])"


@dataclass(frozen=True)
class ArrayHasCondition(FilterCondition):
    """True when the array column holds the given value."""

    column: str
    value: str
    operator: FilterOperator = field(default=FilterOperator.ARRAY_HAS)

    def to_sql(self, case_insensitive: bool = False) -> str:
        """Render as a ``has`` call."""
        return f"has({self.column}, '{escape_string(self.value)}')"


@dataclass(frozen=True)
class JsonValueCondition(FilterCondition):
    """Compare a JSON column, or a string extracted from it at a path."""

    column: str
    operator: FilterOperator
    value: str | None = None
    path: str | None = None

    def to_sql(self, case_insensitive: bool = False) -> str:
        """Render the condition; raise FilterError for unsupported operators."""
        target = (
            self.column
            if self.path is None
            else f"JSONExtractString({self.column}, '{self.path}')"
        )
        op = self.operator
        if op in (FilterOperator.EQUAL, FilterOperator.NOT_EQUAL):
            if self.value is None:
                return f"{target} {op.as_sql()}"
            escaped = escape_string(self.value)
            if case_insensitive:
                return f"lower({target}) {op.as_sql()} lower('{escaped}')"
            return f"{target} {op.as_sql()} '{escaped}'"
        if op in (FilterOperator.IS_NULL, FilterOperator.IS_NOT_NULL):
            return f"{target} {op.as_sql()}"
        raise FilterError("Unsupported operator for JSON type")