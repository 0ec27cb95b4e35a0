# ormkit

Small helpers for code that builds SQL queries. The package has no
dependencies outside the standard library. Everything lives in `ormkit.utils`.

## Installation

```
pip install ormkit
```

## What it offers

- `expr(expression, *args)` wraps a raw SQL fragment and its bound arguments
  in a frozen `SqlExpr` dataclass. The dataclass has the fields `expression`
  and `args`, and `args` is a tuple:

  ```python
  from ormkit.utils import expr

  price_update = expr("price * ? + ?", 2, 100)
  assert price_update.args == (2, 100)
  ```

- `to_query_marks(primary_values)` turns groups of primary-key values into
  placeholders. Single keys give `?,?`, and composite keys give
  `(?,?),(?,?)`. `to_query_values(values)` flattens the same groups into one
  list of arguments, in the same order.

- `is_blank(value)` reports whether a value is the zero value of its kind. The
  blank values are:
  - `None`;
  - an empty `str`, `bytes` or `bytearray`;
  - `False`;
  - any number equal to zero;
  - `datetime.datetime.min`, compared without its time zone;
  - `datetime.date.min`;
  - a dataclass instance whose fields are all blank.

  Every other value, lists and dicts included, counts as not blank.

- `to_string(value)` renders a value as text. Lists and tuples are joined with
  `_`, bytes are decoded as UTF-8, and `None` becomes `""`.
  `equal_as_string(a, b)` compares two values by these text forms.

- `to_searchable_map(*args)` turns a `(column, value)` pair into
  `{column: value}`. A single argument is returned unchanged. In every other
  case the function returns `None`.

- `get_value_from_fields(value, field_names)` reads the named attributes of an
  object and skips any that are missing or `None`. An attribute that has a
  callable `value()` method is replaced by what that method returns, or by
  `None` if the method raises.

- `replace_common_initialisms(text)` rewrites initialisms such as `ID`, `HTTP`
  or `URL` in title case (`Id`, `Http`, `Url`). The full list is in
  `COMMON_INITIALISMS`.

- `SafeMap` is a string-to-string mapping guarded by a lock. Use `m[key] = value`
  to store and `m[key]` to read. A missing key reads as `""`.

- `now()` returns the current local time. Replace `ormkit.utils.now` if you
  need, for example, UTC timestamps.

- `file_with_line_num()` returns `file:line` for the nearest caller outside
  the package's own source files. It returns `""` if none is found within 15
  frames.

- `add_extra_space_if_exist(text)` puts a single space in front of non-empty
  SQL fragments, so that optional clauses can be concatenated.

## What it does not do

ormkit only provides helpers. It does not do any of the following:

- connect to a database;
- run queries;
- define models or map tables;
- create migrations.

## Running the tests

```
pip install -e ".[test]"
pytest
```