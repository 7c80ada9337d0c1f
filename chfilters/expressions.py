"""Composite filter expressions and a builder for WHERE clauses."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from chfilters.conditions import FilterCondition
from chfilters.operators import LogicalOperator


@dataclass(frozen=True)
class FilterGroup:
    """Expressions joined by one logical operator."""

    operator: LogicalOperator
    expressions: tuple[FilterExpression, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "expressions", tuple(self.expressions))

    def to_sql(self, case_insensitive: bool = False) -> str:
        """Render the group in parentheses; an empty group renders as ''."""
        if not self.expressions:
            return ""
        joiner = f" {self.operator.as_sql()} "
        return f"({joiner.join(e.to_sql(case_insensitive) for e in self.expressions)})"

    def __str__(self) -> str:
        joiner = f" {self.operator} "
        return f"({self.operator} {joiner.join(str(e) for e in self.expressions)})"


FilterExpression = Union[FilterCondition, FilterGroup]


def and_(expressions: Iterable[FilterExpression]) -> FilterGroup:
    """Group expressions that must all hold."""
    return FilterGroup(LogicalOperator.AND, tuple(expressions))


def or_(expressions: Iterable[FilterExpression]) -> FilterGroup:
    """Group expressions of which at least one must hold."""
    return FilterGroup(LogicalOperator.OR, tuple(expressions))


@dataclass
class JsonFilter:
    """A filter as received from an API: column, operator, value and connector."""

    n: str
    f: str
    v: str
    c: str | None = None


@dataclass(frozen=True)
class FilterBuilder:
    """Immutable builder; each method returns a new builder."""

    root: FilterExpression | None = None
    case_insensitive: bool = False

    def with_case_insensitive(self, value: bool) -> FilterBuilder:
        """Return a builder that renders string comparisons case-insensitively or not."""
        return dataclasses.replace(self, case_insensitive=value)

    def add_condition(self, condition: FilterCondition) -> FilterBuilder:
        """AND a condition onto the current expression."""
        return self.add_expression(condition)

    def add_expression(self, expression: FilterExpression) -> FilterBuilder:
        """AND an expression onto the current expression."""
        if self.root is None:
            return dataclasses.replace(self, root=expression)
        return dataclasses.replace(
            self, root=FilterGroup(LogicalOperator.AND, (self.root, expression))
        )

    def group(
        self, operator: LogicalOperator, expressions: Iterable[FilterExpression]
    ) -> FilterBuilder:
        """AND a new group of expressions onto the current expression."""
        return self.add_expression(FilterGroup(operator, tuple(expressions)))

    def build(self) -> str:
        """Return ' WHERE ...' for the built expression, or '' when there is none."""
        if self.root is None:
            return ""
        sql = self.root.to_sql(self.case_insensitive)
        return f" WHERE {sql}" if sql else ""