"""
Value types a schema node can declare, and classification of decoded values.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple


class ValueType(str, Enum):
    string = "string"
    integer = "integer"
    number = "number"
    object = "object"
    array = "array"
    boolean = "boolean"
    null = "null"


_VALUE_TYPES = {member.value: member for member in ValueType}


def get_value_type(value: Any) -> Tuple[Optional[ValueType], bool]:
    """
    Resolve the `"type"` field of a raw schema.

    Returns the matching ValueType and an ok flag; ok is False when the value
    is missing, not a string, or not one of the seven known names.
    """

    if not isinstance(value, str):
        return None, False
    value_type = _VALUE_TYPES.get(value)
    if value_type is None:
        return None, False
    return value_type, True


def kind_of(value: Any) -> str:
    """Name the observed kind of a decoded value, for error reports."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_whole_number(value: Any) -> bool:
    """True for ints and for floats with no fractional part."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()
