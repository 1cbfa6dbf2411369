"""
Keywords for `"type": "array"` nodes.

`items`, `contains`, `minContains` and `maxContains` own nested schemas that
are compiled with the full compiler and checked through the engine.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Hashable, List, Mapping

from schema_compiler.errors import SchemaConfigurationError, ValidationError
from schema_compiler.registry._common import compile_subschema, require_bool, require_count
from schema_compiler.runtime.engine import is_valid_node, validate_node
from schema_compiler.schema.models import KeywordBuilder, Predicate, Schema
from schema_compiler.schema.types import kind_of


def min_items(value: Any) -> Predicate:
    bound = require_count("minItems", value)

    def check(target: List[Any]) -> None:
        if len(target) < bound:
            raise ValidationError(bound, len(target))

    return check


def max_items(value: Any) -> Predicate:
    bound = require_count("maxItems", value)

    def check(target: List[Any]) -> None:
        if len(target) > bound:
            raise ValidationError(bound, len(target))

    return check


def _canonical(value: Any) -> Hashable:
    """Hashable stand-in for a decoded value; keeps true and 1 apart."""
    if value is None:
        return ("null",)
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, (int, float)):
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    if isinstance(value, (list, tuple)):
        return ("array", tuple(_canonical(item) for item in value))
    if isinstance(value, dict):
        return ("object", frozenset((key, _canonical(item)) for key, item in value.items()))
    return ("other", repr(value))


def unique_items(value: Any) -> Predicate:
    enabled = require_bool("uniqueItems", value)

    def check(target: List[Any]) -> None:
        if not enabled:
            return
        seen = set()
        for element in target:
            key = _canonical(element)
            if key in seen:
                raise ValidationError("unique", f"elem: {element!r} duplicated")
            seen.add(key)

    return check


def items(value: Any) -> Predicate:
    if isinstance(value, (list, tuple)):
        return _positional_items([compile_subschema("items", raw) for raw in value])
    if isinstance(value, Mapping):
        return _uniform_items(compile_subschema("items", value))
    raise SchemaConfigurationError(f"items requires object or array, got {type(value).__name__}")


def _positional_items(schemas: List[Schema]) -> Predicate:
    def check(target: List[Any]) -> None:
        # Only positions present in both are checked; extra elements are unconstrained.
        for index, (schema, element) in enumerate(zip(schemas, target)):
            try:
                validate_node(schema, element)
            except ValidationError as exc:
                exc.at(index)
                raise

    return check


def _uniform_items(schema: Schema) -> Predicate:
    def check(target: List[Any]) -> None:
        for index, element in enumerate(target):
            try:
                validate_node(schema, element)
            except ValidationError as exc:
                exc.at(index)
                raise

    return check


def contains(value: Any) -> Predicate:
    schema = compile_subschema("contains", value)

    def check(target: List[Any]) -> None:
        kinds = set()
        for element in target:
            kinds.add(kind_of(element))
            if is_valid_node(schema, element):
                return
        raise ValidationError(schema.value_type.value, sorted(kinds))

    return check


def _count_matches(schema: Schema, target: List[Any]) -> int:
    return sum(1 for element in target if is_valid_node(schema, element))


def min_contains(value: Any, contains_value: Any) -> Predicate:
    bound = require_count("minContains", value)
    schema = compile_subschema("contains", contains_value)

    def check(target: List[Any]) -> None:
        matches = _count_matches(schema, target)
        if matches < bound:
            raise ValidationError(bound, matches)

    return check


def max_contains(value: Any, contains_value: Any) -> Predicate:
    bound = require_count("maxContains", value)
    schema = compile_subschema("contains", contains_value)

    def check(target: List[Any]) -> None:
        matches = _count_matches(schema, target)
        if matches > bound:
            raise ValidationError(bound, matches)

    return check


ARRAY_KEYWORDS: Mapping[str, KeywordBuilder] = MappingProxyType(
    {
        "minItems": KeywordBuilder(min_items),
        "maxItems": KeywordBuilder(max_items),
        "uniqueItems": KeywordBuilder(unique_items),
        "items": KeywordBuilder(items),
        "contains": KeywordBuilder(contains),
        "minContains": KeywordBuilder(min_contains, requires=("contains",)),
        "maxContains": KeywordBuilder(max_contains, requires=("contains",)),
    }
)
