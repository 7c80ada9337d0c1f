import pytest

from chfilters import factory
from chfilters.conditions import FilterError
from chfilters.expressions import (
    FilterBuilder,
    FilterGroup,
    JsonFilter,
    and_,
    or_,
)
from chfilters.operators import LogicalOperator, FilterOperator

AGE = factory.uint32("age", FilterOperator.GREATER_THAN, 25)
ACTIVE = factory.uint8("active", FilterOperator.EQUAL, 1)
NAME = factory.string("name", FilterOperator.LIKE, "%o%")


def test_and_group_sql():
    assert and_([AGE, ACTIVE]).to_sql() == "(age > 25 AND active = 1)"


def test_or_group_uses_or_connector():
    sql = or_([AGE, ACTIVE]).to_sql()
    assert sql.startswith("(") and sql.endswith(")")
    assert " OR " in sql and " AND " not in sql
    assert AGE.to_sql() in sql and ACTIVE.to_sql() in sql


def test_empty_group_renders_empty():
    assert and_([]).to_sql() == ""
    assert FilterBuilder().group(LogicalOperator.OR, []).build() == ""


def test_group_accepts_lists():
    group = FilterGroup(LogicalOperator.AND, [AGE, ACTIVE])
    assert group.expressions == (AGE, ACTIVE)


def test_empty_builder_builds_nothing():
    assert FilterBuilder().build() == ""


def test_single_condition_build():
    built = FilterBuilder().add_condition(AGE).build()
    assert built == " WHERE " + AGE.to_sql()


def test_adding_two_conditions_wraps_in_and():
    builder = FilterBuilder().add_condition(AGE).add_condition(ACTIVE)
    assert builder.root == FilterGroup(LogicalOperator.AND, (AGE, ACTIVE))


def test_adding_third_condition_nests_previous_root():
    first = FilterBuilder().add_condition(AGE).add_condition(ACTIVE)
    second = first.add_condition(NAME)
    assert second.root.expressions[0] == first.root
    assert second.root.expressions[1] == NAME


def test_builder_is_not_mutated():
    base = FilterBuilder()
    base.add_condition(AGE)
    assert base.root is None


def test_group_on_empty_builder_becomes_root():
    builder = FilterBuilder().group(LogicalOperator.OR, [AGE, ACTIVE])
    assert builder.root == or_([AGE, ACTIVE])


def test_group_on_existing_root_is_anded():
    builder = FilterBuilder().add_condition(NAME).group(LogicalOperator.OR, [AGE])
    assert builder.root.operator is LogicalOperator.AND
    assert builder.root.expressions == (NAME, or_([AGE]))


def test_complex_query_build():
    score = factory.float64("score", FilterOperator.GREATER_THAN, 85.0)
    expr = and_([NAME, or_([AGE, score])])
    built = FilterBuilder().add_expression(expr).build()
    assert built == " WHERE (name LIKE '%o%' AND (age > 25 OR score > 85))"


def test_case_insensitive_flag_reaches_conditions():
    cond = factory.string("name", FilterOperator.EQUAL, "Jane")
    plain = FilterBuilder().add_condition(cond)
    folded = plain.with_case_insensitive(True)
    assert folded.case_insensitive is True
    assert plain.case_insensitive is False
    assert folded.build() == " WHERE " + cond.to_sql(True)
    assert "lower(name)" in folded.build()
    assert "lower(name)" not in plain.build()


def test_errors_propagate_from_nested_conditions():
    bad = factory.string("name", FilterOperator.IN, None)
    with pytest.raises(FilterError):
        FilterBuilder().add_expression(and_([AGE, bad])).build()


def test_json_filter_connector_is_optional():
    item = JsonFilter(n="age", f=">", v="25")
    assert item.c is None
    assert JsonFilter("age", ">", "25", "AND").c == "AND"