"""
Keywords for `"type": "string"` nodes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from schema_compiler.errors import SchemaConfigurationError, ValidationError
from schema_compiler.registry._common import compile_pattern, require_count, require_string
from schema_compiler.registry.formats import FORMAT_CHECKERS
from schema_compiler.schema.models import KeywordBuilder, Predicate


def min_length(value: Any) -> Predicate:
    bound = require_count("minLength", value)

    def check(target: str) -> None:
        if len(target) < bound:
            raise ValidationError(bound, len(target))

    return check


def max_length(value: Any) -> Predicate:
    bound = require_count("maxLength", value)

    def check(target: str) -> None:
        if len(target) > bound:
            raise ValidationError(bound, len(target))

    return check


def pattern(value: Any) -> Predicate:
    regex = compile_pattern("pattern", value)

    def check(target: str) -> None:
        if regex.search(target) is None:
            raise ValidationError(regex.pattern, target)

    return check


def format_(value: Any) -> Predicate:
    name = require_string("format", value)
    checker = FORMAT_CHECKERS.get(name)
    if checker is None:
        raise SchemaConfigurationError(
            f"unknown format {name!r} for string; supported: {sorted(FORMAT_CHECKERS)}"
        )

    def check(target: str) -> None:
        if not checker(target):
            raise ValidationError(name, target)

    return check


STRING_KEYWORDS: Mapping[str, KeywordBuilder] = MappingProxyType(
    {
        "minLength": KeywordBuilder(min_length),
        "maxLength": KeywordBuilder(max_length),
        "pattern": KeywordBuilder(pattern),
        "format": KeywordBuilder(format_),
    }
)
