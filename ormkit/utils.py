"""Small helpers shared by the query builder: SQL marks, blank checks, conversions."""

from __future__ import annotations

import dataclasses
import datetime
import inspect
import numbers
import os
import re
import threading
from typing import Any, Iterable, Sequence

__all__ = [
    "COMMON_INITIALISMS",
    "SafeMap",
    "SqlExpr",
    "add_extra_space_if_exist",
    "equal_as_string",
    "expr",
    "file_with_line_num",
    "get_value_from_fields",
    "is_blank",
    "now",
    "replace_common_initialisms",
    "to_query_marks",
    "to_query_values",
    "to_searchable_map",
    "to_string",
]

COMMON_INITIALISMS: tuple[str, ...] = (
    "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML", "HTTP", "HTTPS",
    "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS", "RPC", "SLA", "SMTP", "SSH",
    "TLS", "TTL", "UID", "UI", "UUID", "URI", "URL", "UTF8", "VM", "XML", "XSRF",
    "XSS",
)

# Alternation keeps list order, so an earlier initialism wins at a given position.
_INITIALISMS_PATTERN = re.compile("|".join(re.escape(i) for i in COMMON_INITIALISMS))

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_MAX_CALLER_DEPTH = 15
_FIRST_CALLER_DEPTH = 2


def now() -> datetime.datetime:
    """Return the current local time."""
    return datetime.datetime.now()


@dataclasses.dataclass(frozen=True)
class SqlExpr:
    """A raw SQL expression with its bound arguments."""

    expression: str
    args: tuple[Any, ...] = ()


def expr(expression: str, *args: Any) -> SqlExpr:
    """Build a raw SQL expression, e.g. ``expr("price * ? + ?", 2, 100)``."""
    return SqlExpr(expression, tuple(args))


class SafeMap:
    """A thread-safe string-to-string map; missing keys read as an empty string."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    def __setitem__(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def __getitem__(self, key: str) -> str:
        with self._lock:
            return self._data.get(key, "")


def replace_common_initialisms(text: str) -> str:
    """Turn well-known initialisms such as ``ID`` or ``HTTP`` into ``Id`` and ``Http``."""
    return _INITIALISMS_PATTERN.sub(lambda m: m.group().capitalize(), text)


def to_query_marks(primary_values: Iterable[Sequence[Any]]) -> str:
    """Return placeholder marks for a list of (possibly composite) key values."""
    results = []
    for primary_value in primary_values:
        marks = ["?"] * len(primary_value)
        if len(marks) > 1:
            results.append(f"({','.join(marks)})")
        else:
            results.append("".join(marks))
    return ",".join(results)


def to_query_values(values: Iterable[Iterable[Any]]) -> list[Any]:
    """Flatten nested key values into one argument list."""
    return [v for value in values for v in value]


def _is_package_source(filename: str) -> bool:
    path = os.path.abspath(filename)
    if not path.startswith(_PACKAGE_DIR + os.sep):
        return False
    return not os.path.basename(path).startswith("test_")


def file_with_line_num() -> str:
    """Return ``file:line`` of the nearest caller outside this package, or ``""``."""
    frame = inspect.currentframe()
    try:
        for _ in range(_FIRST_CALLER_DEPTH):
            if frame is None:
                return ""
            frame = frame.f_back
        depth = _FIRST_CALLER_DEPTH
        while frame is not None and depth < _MAX_CALLER_DEPTH:
            filename = frame.f_code.co_filename
            if not _is_package_source(filename):
                return f"{filename}:{frame.f_lineno}"
            frame = frame.f_back
            depth += 1
        return ""
    finally:
        del frame


def is_blank(value: Any) -> bool:
    """Tell whether a value is the zero value of its kind."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) == 0
    if isinstance(value, bool):
        return not value
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, datetime.datetime):
        return value.replace(tzinfo=None) == datetime.datetime.min
    if isinstance(value, datetime.date):
        return value == datetime.date.min
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(is_blank(getattr(value, f.name)) for f in dataclasses.fields(value))
    return False


def to_searchable_map(*args: Any) -> Any:
    """Turn ``(column, value)`` into a mapping, or pass a single condition through."""
    if len(args) > 1:
        if isinstance(args[0], str):
            return {args[0]: args[1]}
        return None
    if len(args) == 1:
        return args[0]
    return None


def equal_as_string(a: Any, b: Any) -> bool:
    """Compare two values by their string forms."""
    return to_string(a) == to_string(b)


def to_string(value: Any) -> str:
    """Render a value as text; sequences are joined with ``_``."""
    if isinstance(value, (list, tuple)):
        return "_".join(to_string(v) for v in value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if value is None:
        return ""
    return str(value)


def _database_value(result: Any) -> Any:
    converter = getattr(result, "value", None)
    if callable(converter):
        try:
            return converter()
        except Exception:
            return None
    return result


def get_value_from_fields(value: Any, field_names: Iterable[str]) -> list[Any]:
    """Collect the named attributes of an object, skipping missing or ``None`` ones.

    Attributes that provide a ``value()`` method are replaced by its result.
    """
    if value is None:
        return []
    results = []
    missing = object()
    for name in field_names:
        result = getattr(value, name, missing)
        if result is missing or result is None:
            continue
        results.append(_database_value(result))
    return results


def add_extra_space_if_exist(text: str) -> str:
    """Prefix non-empty text with a space."""
    return " " + text if text else ""