# chfilters

`chfilters` builds the `WHERE` part of ClickHouse SQL queries from typed
filter conditions. It handles quoting, case-insensitive matching, `IN`
lists, date ranges, array checks and JSON paths. You can combine conditions
into nested `AND` / `OR` groups.

## Installation

```
pip install chfilters
```

The package needs only the Python standard library and runs on Python 3.10
or later.

## Building conditions

The helper functions in `chfilters.factory` create conditions. Each helper
takes a comparison operator, which is a `FilterOperator` from
`chfilters.operators`:

```python
from chfilters.operators import FilterOperator
from chfilters import factory

cond = factory.string("name", FilterOperator.LIKE, "%o%")
cond.to_sql(False)            # "name LIKE '%o%'"
cond.to_sql(True)             # "lower(name) LIKE lower('%o%')"

factory.uint32("age", FilterOperator.GREATER_THAN, 25).to_sql(False)
# "age > 25"

factory.float64("score", FilterOperator.GREATER_THAN, 85.0).to_sql(False)
# "score > 85"

factory.boolean("active", FilterOperator.EQUAL, True).to_sql(False)
# "active = 1"

factory.string("name", FilterOperator.IN, "Alice, Bob").to_sql(False)
# "name IN ('Alice', 'Bob')"

factory.date_range("created_at", "2022-01-01", "2022-02-01").to_sql(False)
# "created_at BETWEEN '2022-01-01' AND '2022-02-01'"

factory.date_only("created_at", "2022-01-01").to_sql(False)
# "toDate(created_at) = toDate('2022-01-01')"

factory.array_has("tags", "developer").to_sql(False)
# "has(tags, 'developer')"

factory.array_contains("tags", "developer, rust").to_sql(False)
# "hasAll(tags, array['developer', 'rust'])"

factory.json("metadata", FilterOperator.EQUAL, "Design", "department").to_sql(False)
# "JSONExtractString(metadata, 'department') = 'Design'"

factory.in_values("age", FilterOperator.IN, ["25", "30"]).to_sql(False)
# "age IN (25, 30)"
```

The factory covers the common column types. For any other ClickHouse type in
`chfilters.conditions.ValueType`, such as `UINT16` or `FLOAT32`, construct a
`ValueCondition(column, operator, value, value_type)` directly.

String values have their single quotes doubled. `to_sql` raises
`chfilters.conditions.FilterError` in these cases:

- the operator does not fit the column type, for example `LIKE` on an
  integer column;
- `IN` or `NOT IN` has no values.

When you create a condition, an integer outside the range of its column type
raises `FilterError`, and a value of the wrong Python type raises
`TypeError`. `str(condition)` returns the SQL. If rendering fails, it returns
`"Error: ..."` instead.

## Grouping and building a WHERE clause

`FilterBuilder` in `chfilters.expressions` collects conditions and
expressions. Each one you add is joined to what is already there with `AND`.
Build explicit groups with `and_` and `or_`, or with `FilterBuilder.group`:

```python
from chfilters.expressions import FilterBuilder, and_, or_
from chfilters.operators import FilterOperator
from chfilters import factory

expr = and_([
    factory.string("name", FilterOperator.LIKE, "%o%"),
    or_([
        factory.uint32("age", FilterOperator.GREATER_THAN, 25),
        factory.float64("score", FilterOperator.GREATER_THAN, 85.0),
    ]),
])

where = FilterBuilder().add_expression(expr).build()
# " WHERE (name LIKE '%o%' AND (age > 25 OR score > 85))"
```

`build()` returns an empty string when the builder is empty. Otherwise the
result starts with `" WHERE "`, so you can append it directly after the
table name. Builders are immutable, and every method returns a new builder.
Call `with_case_insensitive(True)` to make string and JSON comparisons
case-insensitive.

## Parsing operators

`chfilters.operators.parse_operator` turns text into a `FilterOperator`.
It accepts text such as `">="`, `"not in"`, `"starts with"` and
`"array has"`, and matching ignores case. Text it does not recognise becomes
`FilterOperator.EQUAL`.

## What the package does not do

- It only produces SQL text. It does not connect to ClickHouse or run
  queries.
- It has no `ORDER BY`, `LIMIT` or pagination support.
- `chfilters.expressions.JsonFilter` holds a filter as an API might send it
  (column `n`, operator `f`, value `v`, connector `c`). The package does not
  turn lists of `JsonFilter` into expressions, and it has no column
  definitions to map them against. Build the conditions yourself, with
  `parse_operator` and the factory helpers.