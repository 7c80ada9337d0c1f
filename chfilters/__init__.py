"""Typed filter conditions, groups and a builder that render ClickHouse WHERE clauses."""

__version__ = "0.1.0"

__all__ = ["conditions", "expressions", "factory", "operators", "special_conditions"]