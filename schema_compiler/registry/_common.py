"""
Configuration checks shared by the keyword builders.
"""

from __future__ import annotations

import math
import re
from typing import Any, List, Mapping

from schema_compiler.errors import SchemaConfigurationError
from schema_compiler.schema.models import Schema
from schema_compiler.schema.types import is_number, is_whole_number


def require_number(keyword: str, value: Any) -> float:
    if not is_number(value):
        raise SchemaConfigurationError(f"{keyword} requires number, got {value!r}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise SchemaConfigurationError(f"{keyword} is out of float range") from exc
    if not math.isfinite(number):
        raise SchemaConfigurationError(f"{keyword} requires finite number, got {value!r}")
    return number


def require_whole_number(keyword: str, value: Any) -> int:
    if not is_whole_number(value):
        raise SchemaConfigurationError(f"{keyword} requires integer, got {value!r}")
    return int(value)


def require_count(keyword: str, value: Any) -> int:
    """A whole number bound on a length or count."""
    count = require_whole_number(keyword, value)
    if count < 0:
        raise SchemaConfigurationError(f"{keyword} requires non-negative integer, got {value!r}")
    return count


def require_string(keyword: str, value: Any) -> str:
    if not isinstance(value, str):
        raise SchemaConfigurationError(f"{keyword} requires string, got {value!r}")
    return value


def require_bool(keyword: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise SchemaConfigurationError(f"{keyword} requires boolean, got {value!r}")
    return value


def require_mapping(keyword: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaConfigurationError(f"{keyword} requires object, got {type(value).__name__}")
    return value


def require_string_list(keyword: str, value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise SchemaConfigurationError(f"{keyword} requires array of strings, got {value!r}")
    return list(value)


def compile_pattern(keyword: str, pattern: Any) -> "re.Pattern[str]":
    pattern = require_string(keyword, pattern)
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise SchemaConfigurationError(f"{keyword} has invalid regular expression {pattern!r}: {exc}") from exc


def compile_subschema(keyword: str, raw: Any) -> Schema:
    """Compile a nested schema owned by `keyword` with the full compiler."""

    # Imported here: the compiler itself imports the registries.
    from schema_compiler.compiler.compile import compile_schema

    if not isinstance(raw, Mapping):
        raise SchemaConfigurationError(f"{keyword} requires schema object, got {type(raw).__name__}")
    try:
        return compile_schema(raw)
    except SchemaConfigurationError as exc:
        raise SchemaConfigurationError(f"{keyword}: {exc}") from exc
