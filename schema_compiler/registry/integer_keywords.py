"""
Keywords for `"type": "integer"` nodes.

Same keywords as for numbers, but the configured bounds must be whole numbers
and targets arrive as ints.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from schema_compiler.errors import SchemaConfigurationError, ValidationError
from schema_compiler.registry._common import require_whole_number
from schema_compiler.schema.models import KeywordBuilder, Predicate


def minimum(value: Any) -> Predicate:
    bound = require_whole_number("minimum", value)

    def check(target: int) -> None:
        if target < bound:
            raise ValidationError(bound, target)

    return check


def exclusive_minimum(value: Any) -> Predicate:
    bound = require_whole_number("exclusiveMinimum", value)

    def check(target: int) -> None:
        if target <= bound:
            raise ValidationError(bound, target)

    return check


def maximum(value: Any) -> Predicate:
    bound = require_whole_number("maximum", value)

    def check(target: int) -> None:
        if target > bound:
            raise ValidationError(bound, target)

    return check


def exclusive_maximum(value: Any) -> Predicate:
    bound = require_whole_number("exclusiveMaximum", value)

    def check(target: int) -> None:
        if target >= bound:
            raise ValidationError(bound, target)

    return check


def multiple_of(value: Any) -> Predicate:
    divisor = require_whole_number("multipleOf", value)
    if divisor == 0:
        raise SchemaConfigurationError("multipleOf requires non-zero integer")

    def check(target: int) -> None:
        if target % divisor:
            raise ValidationError(divisor, target)

    return check


INTEGER_KEYWORDS: Mapping[str, KeywordBuilder] = MappingProxyType(
    {
        "minimum": KeywordBuilder(minimum),
        "exclusiveMinimum": KeywordBuilder(exclusive_minimum),
        "maximum": KeywordBuilder(maximum),
        "exclusiveMaximum": KeywordBuilder(exclusive_maximum),
        "multipleOf": KeywordBuilder(multiple_of),
    }
)
