"""
Validation engine: walks a target value against a compiled schema node.
"""

from __future__ import annotations

from typing import Any

from schema_compiler.errors import TypeMismatchError, ValidationError
from schema_compiler.schema.models import Schema
from schema_compiler.schema.types import ValueType, is_number, is_whole_number, kind_of


def coerce_target(value_type: ValueType, target: Any) -> Any:
    """
    Check the target against the declared type and return it in the
    representation the node's predicates expect.
    """

    if value_type == ValueType.string:
        if isinstance(target, str):
            return target
    elif value_type == ValueType.integer:
        if is_whole_number(target):
            return int(target)
    elif value_type == ValueType.number:
        if is_number(target):
            try:
                return float(target)
            except OverflowError:
                # Integer beyond float range; int/float comparisons stay exact.
                return target
    elif value_type == ValueType.boolean:
        if isinstance(target, bool):
            return target
    elif value_type == ValueType.null:
        if target is None:
            return None
    elif value_type == ValueType.array:
        if isinstance(target, list):
            return target
        if isinstance(target, tuple):
            return list(target)
    elif value_type == ValueType.object:
        if isinstance(target, dict):
            return target

    raise TypeMismatchError(value_type.value, kind_of(target))


def validate_node(schema: Schema, target: Any) -> None:
    """
    Validate `target` against one compiled node.

    Predicates run in declaration order and the first violation stops
    evaluation. Nested schemas are reached only through the keyword
    predicates that own them (properties, items, contains, ...).
    """

    value = coerce_target(schema.value_type, target)
    for keyword, predicate in schema.keyword_validators:
        try:
            predicate(value)
        except ValidationError as exc:
            exc.set_keyword(keyword)
            raise


def is_valid_node(schema: Schema, target: Any) -> bool:
    try:
        validate_node(schema, target)
    except ValidationError:
        return False
    return True
