import pytest

from chfilters.operators import (
    FilterOperator,
    LogicalOperator,
    parse_operator,
)


def test_logical_operator_sql_and_str():
    assert LogicalOperator.AND.as_sql() == "AND"
    assert LogicalOperator.OR.as_sql() == "OR"
    assert str(LogicalOperator.AND) == "AND"
    assert str(LogicalOperator.OR) == "OR"


@pytest.mark.parametrize(
    "op, sql",
    [
        (FilterOperator.EQUAL, "="),
        (FilterOperator.NOT_EQUAL, "!="),
        (FilterOperator.GREATER_THAN, ">"),
        (FilterOperator.GREATER_THAN_OR_EQUAL, ">="),
        (FilterOperator.LESS_THAN, "<"),
        (FilterOperator.LESS_THAN_OR_EQUAL, "<="),
        (FilterOperator.LIKE, "LIKE"),
        (FilterOperator.NOT_LIKE, "NOT LIKE"),
        (FilterOperator.IN, "IN"),
        (FilterOperator.NOT_IN, "NOT IN"),
        (FilterOperator.IS_NULL, "IS NULL"),
        (FilterOperator.IS_NOT_NULL, "IS NOT NULL"),
        (FilterOperator.STARTS_WITH, "LIKE"),
        (FilterOperator.ENDS_WITH, "LIKE"),
        (FilterOperator.ARRAY_CONTAINS, "hasAll"),
        (FilterOperator.ARRAY_HAS, "has"),
        (FilterOperator.ARRAY_ALL, "ALL"),
        (FilterOperator.ARRAY_ANY, "ANY"),
        (FilterOperator.DATE_EQUAL, "="),
        (FilterOperator.DATE_RANGE, "BETWEEN"),
        (FilterOperator.RELATIVE_DATE, ">"),
    ],
)
def test_filter_operator_sql(op, sql):
    assert op.as_sql() == sql
    assert str(op) == sql


def test_every_operator_has_sql():
    members = list(FilterOperator)
    assert len(members) == 21
    for op in members:
        sql = FilterOperator.as_sql(op)
        assert len(sql) > 0
        assert sql == sql.strip()
        assert str(op) == sql


def test_format_value_wildcards():
    assert FilterOperator.STARTS_WITH.format_value("abc") == "abc%"
    assert FilterOperator.ENDS_WITH.format_value("abc") == "%abc"
    assert FilterOperator.EQUAL.format_value("abc") == "abc"
    assert FilterOperator.LIKE.format_value("%abc%") == "%abc%"


@pytest.mark.parametrize(
    "text, op",
    [
        ("like", FilterOperator.LIKE),
        ("=", FilterOperator.EQUAL),
        ("!=", FilterOperator.NOT_EQUAL),
        (">", FilterOperator.GREATER_THAN),
        (">=", FilterOperator.GREATER_THAN_OR_EQUAL),
        ("<", FilterOperator.LESS_THAN),
        ("<=", FilterOperator.LESS_THAN_OR_EQUAL),
        ("in", FilterOperator.IN),
        ("Not In", FilterOperator.NOT_IN),
        ("is null", FilterOperator.IS_NULL),
        ("IS NOT NULL", FilterOperator.IS_NOT_NULL),
        ("starts with", FilterOperator.STARTS_WITH),
        ("ENDS WITH", FilterOperator.ENDS_WITH),
        ("ARRAY CONTAINS", FilterOperator.ARRAY_CONTAINS),
        ("array has", FilterOperator.ARRAY_HAS),
        ("ARRAY ALL", FilterOperator.ARRAY_ALL),
        ("ARRAY ANY", FilterOperator.ARRAY_ANY),
        ("date_only", FilterOperator.DATE_EQUAL),
        ("DATE_RANGE", FilterOperator.DATE_RANGE),
        ("relative", FilterOperator.RELATIVE_DATE),
    ],
)
def test_parse_operator(text, op):
    assert parse_operator(text) is op


@pytest.mark.parametrize("text", ["", "unknown", "==", "BETWEEN"])
def test_parse_operator_defaults_to_equal(text):
    assert parse_operator(text) is FilterOperator.EQUAL