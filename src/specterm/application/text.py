"""Human-readable serialization of values shown in expectation diffs."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Set
from typing import Any

logger = logging.getLogger(__name__)

ObjectFormatter = Callable[[object], str]

_INDENT = "    "


def describe_instance(value: object) -> str:
    """Default object formatter: names the class, not the fields."""
    return f"an instance of `{type(value).__qualname__}`"


def kind_of(value: object) -> str:
    """Runtime kind label: boolean, integer, double, string, NULL, array, object."""
    match value:
        case None:
            return "NULL"
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "double"
        case str() | bytes():
            return "string"
        case list() | tuple() | Mapping() | Set():
            return "array"
        case _:
            return "object"


def dump_string(value: str | bytes) -> str:
    """Quote and escape a string."""
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="backslashreplace")
    return json.dumps(value, ensure_ascii=False)


def to_string(
    value: Any,
    object_formatter: ObjectFormatter = describe_instance,
) -> str:
    """Serialize a value for display.

    Arrays (lists, tuples, sets, mappings) are rendered deeply as
    "key => value" blocks. Objects go through object_formatter only, so
    cyclic object graphs cannot recurse. A failing formatter falls back
    to object.__repr__.

    Args:
        value: Value to render
        object_formatter: Renders non-array, non-scalar values

    Returns:
        Multi-line text without trailing newline
    """
    return _render(value, object_formatter, depth=0, seen=frozenset())


def _render(value: Any, formatter: ObjectFormatter, depth: int, seen: frozenset[int]) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case int() | float():
            return repr(value)
        case str() | bytes():
            return dump_string(value)
        case list() | tuple() | Mapping() | Set():
            return _render_array(value, formatter, depth, seen)
        case _:
            return _render_object(value, formatter)


def _render_array(value: Any, formatter: ObjectFormatter, depth: int, seen: frozenset[int]) -> str:
    if id(value) in seen:
        return "[*RECURSION*]"
    try:
        items = _array_items(value)
    except Exception:  # noqa: BLE001
        logger.warning("Items of %s could not be read, using repr", type(value).__name__, exc_info=True)
        return object.__repr__(value)
    if not items:
        return "[]"

    seen = seen | {id(value)}
    inner = _INDENT * (depth + 1)
    lines = ["["]
    for key, item in items:
        rendered_key = dump_string(key) if isinstance(key, str) else _render(key, formatter, depth + 1, seen)
        rendered = _render(item, formatter, depth + 1, seen)
        lines.append(f"{inner}{rendered_key} => {rendered},")
    lines.append(f"{_INDENT * depth}]")
    return "\n".join(lines)


def _array_items(value: Any) -> list[tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return list(value.items())
    members = list(value)
    if isinstance(value, Set):
        try:
            members.sort(key=repr)
        except Exception:  # noqa: BLE001
            logger.debug("Members of %s not sortable by repr, iteration order kept", type(value).__name__)
    return list(enumerate(members))


def _render_object(value: object, formatter: ObjectFormatter) -> str:
    try:
        return str(formatter(value))
    except Exception:  # noqa: BLE001
        # Diff rendering must not abort the report.
        logger.warning("Object formatter failed for %s, using repr", type(value).__name__, exc_info=True)
        return object.__repr__(value)
