"""
Keywords for `"type": "number"` nodes. Targets arrive as floats, or as ints too
large to become one.
"""

from __future__ import annotations

import math
from fractions import Fraction
from types import MappingProxyType
from typing import Any, Mapping

from schema_compiler.errors import SchemaConfigurationError, ValidationError
from schema_compiler.registry._common import require_number
from schema_compiler.schema.models import KeywordBuilder, Predicate


def minimum(value: Any) -> Predicate:
    bound = require_number("minimum", value)

    def check(target: float) -> None:
        if target < bound:
            raise ValidationError(bound, target)

    return check


def exclusive_minimum(value: Any) -> Predicate:
    bound = require_number("exclusiveMinimum", value)

    def check(target: float) -> None:
        if target <= bound:
            raise ValidationError(bound, target)

    return check


def maximum(value: Any) -> Predicate:
    bound = require_number("maximum", value)

    def check(target: float) -> None:
        if target > bound:
            raise ValidationError(bound, target)

    return check


def exclusive_maximum(value: Any) -> Predicate:
    bound = require_number("exclusiveMaximum", value)

    def check(target: float) -> None:
        if target >= bound:
            raise ValidationError(bound, target)

    return check


def _is_multiple(target: float, divisor: float) -> bool:
    try:
        quotient = target / divisor
    except OverflowError:
        quotient = math.inf
    if math.isfinite(quotient):
        return quotient.is_integer()
    if isinstance(target, float) and not math.isfinite(target):
        return False
    # Quotient left float range; compare exactly.
    return Fraction(target) % Fraction(divisor) == 0


def multiple_of(value: Any) -> Predicate:
    divisor = require_number("multipleOf", value)
    if divisor == 0:
        raise SchemaConfigurationError("multipleOf requires non-zero number")

    def check(target: float) -> None:
        if not _is_multiple(target, divisor):
            raise ValidationError(divisor, target)

    return check


NUMBER_KEYWORDS: Mapping[str, KeywordBuilder] = MappingProxyType(
    {
        "minimum": KeywordBuilder(minimum),
        "exclusiveMinimum": KeywordBuilder(exclusive_minimum),
        "maximum": KeywordBuilder(maximum),
        "exclusiveMaximum": KeywordBuilder(exclusive_maximum),
        "multipleOf": KeywordBuilder(multiple_of),
    }
)
