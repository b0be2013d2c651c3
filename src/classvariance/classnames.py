"""Class string helpers: value stringification and fragment normalization."""

from __future__ import annotations

from enum import Enum
from numbers import Number
from typing import Any, Iterable

__all__ = ["to_class_string", "is_class_value", "combine_classes"]


def to_class_string(value: Any) -> str:
    """Convert a selection value to its string form.

    - None           -> ''
    - bool           -> 'true' / 'false'
    - numeric zero   -> '0'
    - Enum member    -> str of its value
    - str / Number   -> str(value)

    Anything else raises TypeError.
    """
    if value is None:
        return ""
    # bool before Number: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return to_class_string(value.value)
    if isinstance(value, Number):
        if value == 0:
            return "0"
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(
        f"Cannot use {type(value).__name__} value {value!r} as a class name"
    )


def is_class_value(value: Any) -> bool:
    """Return True if *value* has a class-string form."""
    try:
        to_class_string(value)
    except TypeError:
        return False
    return True


def combine_classes(classes: Iterable[Any]) -> str:
    """Join class fragments into one normalized class string.

    Empty and None entries are dropped, and whitespace is collapsed so the
    result never has leading, trailing or doubled spaces.
    """
    parts: list[str] = []
    for cls in classes:
        text = to_class_string(cls).strip()
        if text:
            parts.append(" ".join(text.split()))
    return " ".join(parts)
