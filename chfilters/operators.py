"""Operators and column type tags used to build ClickHouse WHERE clauses."""

from __future__ import annotations

import enum


class ColumnTypeInfo(enum.Enum):
    """Broad category of a column, used to decide how values are quoted."""

    STRING = "string"
    NUMERIC = "numeric"
    UUID = "uuid"
    DATE = "date"
    BOOLEAN = "boolean"
    ARRAY = "array"
    JSON = "json"
    OTHER = "other"


class LogicalOperator(enum.Enum):
    """Connector used to combine filter expressions."""

    AND = "AND"
    OR = "OR"

    def as_sql(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class FilterOperator(enum.Enum):
    """Comparison operator of a single filter condition."""

    EQUAL = enum.auto()
    NOT_EQUAL = enum.auto()
    GREATER_THAN = enum.auto()
    GREATER_THAN_OR_EQUAL = enum.auto()
    LESS_THAN = enum.auto()
    LESS_THAN_OR_EQUAL = enum.auto()
    LIKE = enum.auto()
    NOT_LIKE = enum.auto()
    IN = enum.auto()
    NOT_IN = enum.auto()
    IS_NULL = enum.auto()
    IS_NOT_NULL = enum.auto()
    STARTS_WITH = enum.auto()
    ENDS_WITH = enum.auto()
    ARRAY_CONTAINS = enum.auto()
    ARRAY_HAS = enum.auto()
    ARRAY_ALL = enum.auto()
    ARRAY_ANY = enum.auto()
    DATE_EQUAL = enum.auto()
    DATE_RANGE = enum.auto()
    RELATIVE_DATE = enum.auto()

    def as_sql(self) -> str:
        """Return the SQL keyword or function name for this operator."""
        return _SQL_TEXT[self]

    def format_value(self, value: str) -> str:
        """Wrap a value in the LIKE wildcards that prefix/suffix matching needs."""
        if self is FilterOperator.STARTS_WITH:
            return f"{value}%"
        if self is FilterOperator.ENDS_WITH:
            return f"%{value}"
        return value

    def __str__(self) -> str:
        return self.as_sql()


_SQL_TEXT = {
    FilterOperator.EQUAL: "=",
    FilterOperator.NOT_EQUAL: "!=",
    FilterOperator.GREATER_THAN: ">",
    FilterOperator.GREATER_THAN_OR_EQUAL: ">=",
    FilterOperator.LESS_THAN: "<",
    FilterOperator.LESS_THAN_OR_EQUAL: "<=",
    FilterOperator.LIKE: "LIKE",
    FilterOperator.NOT_LIKE: "NOT LIKE",
    FilterOperator.IN: "IN",
    FilterOperator.NOT_IN: "NOT IN",
    FilterOperator.IS_NULL: "IS NULL",
    FilterOperator.IS_NOT_NULL: "IS NOT NULL",
    FilterOperator.STARTS_WITH: "LIKE",
    FilterOperator.ENDS_WITH: "LIKE",
    FilterOperator.ARRAY_CONTAINS: "hasAll",
    FilterOperator.ARRAY_HAS: "has",
    FilterOperator.ARRAY_ALL: "ALL",
    FilterOperator.ARRAY_ANY: "ANY",
    FilterOperator.DATE_EQUAL: "=",
    FilterOperator.DATE_RANGE: "BETWEEN",
    FilterOperator.RELATIVE_DATE: ">",
}

_PARSED = {
    "LIKE": FilterOperator.LIKE,
    "=": FilterOperator.EQUAL,
    "!=": FilterOperator.NOT_EQUAL,
    ">": FilterOperator.GREATER_THAN,
    ">=": FilterOperator.GREATER_THAN_OR_EQUAL,
    "<": FilterOperator.LESS_THAN,
    "<=": FilterOperator.LESS_THAN_OR_EQUAL,
    "IN": FilterOperator.IN,
    "NOT IN": FilterOperator.NOT_IN,
    "IS NULL": FilterOperator.IS_NULL,
    "IS NOT NULL": FilterOperator.IS_NOT_NULL,
    "STARTS WITH": FilterOperator.STARTS_WITH,
    "ENDS WITH": FilterOperator.ENDS_WITH,
    "ARRAY CONTAINS": FilterOperator.ARRAY_CONTAINS,
    "ARRAY HAS": FilterOperator.ARRAY_HAS,
    "ARRAY ALL": FilterOperator.ARRAY_ALL,
    "ARRAY ANY": FilterOperator.ARRAY_ANY,
    "DATE_ONLY": FilterOperator.DATE_EQUAL,
    "DATE_RANGE": FilterOperator.DATE_RANGE,
    "RELATIVE": FilterOperator.RELATIVE_DATE,
}


def parse_operator(op: str) -> FilterOperator:
    """Parse an operator name, case-insensitively; unknown names mean equality."""
    return _PARSED.get(op.upper(), FilterOperator.EQUAL)