"""
Keywords for `"type": "object"` nodes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from schema_compiler.errors import SchemaConfigurationError, ValidationError
from schema_compiler.registry._common import (
    compile_pattern,
    compile_subschema,
    require_count,
    require_mapping,
    require_string_list,
)
from schema_compiler.runtime.engine import validate_node
from schema_compiler.schema.models import KeywordBuilder, Predicate, Schema
from schema_compiler.schema.types import ValueType


@dataclass(frozen=True)
class PropertiesValidator:
    """
    Validates each declared property present in the target against its fully
    compiled schema. The compiler also exposes `schemas` as the node's
    property tree.
    """

    schemas: Mapping[str, Schema]

    def __call__(self, target: Dict[str, Any]) -> None:
        for name, schema in self.schemas.items():
            if name not in target:
                continue
            try:
                validate_node(schema, target[name])
            except ValidationError as exc:
                exc.at(name)
                raise


def properties(value: Any) -> Predicate:
    if not isinstance(value, Mapping):
        raise SchemaConfigurationError("schema has wrong properties")
    schemas: Dict[str, Schema] = {}
    for name, raw in value.items():
        # Entries that are not schema objects are ignored.
        if not isinstance(raw, Mapping):
            continue
        schemas[name] = compile_subschema(f"properties.{name}", raw)
    return PropertiesValidator(MappingProxyType(schemas))


def required(value: Any) -> Predicate:
    names = tuple(require_string_list("required", value))

    def check(target: Dict[str, Any]) -> None:
        for name in names:
            if name not in target:
                raise ValidationError(name, "missing")

    return check


def dependent_required(value: Any) -> Predicate:
    raw = require_mapping("dependentRequired", value)
    dependencies: List[Tuple[str, Tuple[str, ...]]] = [
        (trigger, tuple(require_string_list(f"dependentRequired.{trigger}", names)))
        for trigger, names in raw.items()
    ]

    def check(target: Dict[str, Any]) -> None:
        for trigger, names in dependencies:
            if trigger not in target:
                continue
            for name in names:
                if name not in target:
                    raise ValidationError(name, "missing")

    return check


def min_properties(value: Any) -> Predicate:
    bound = require_count("minProperties", value)

    def check(target: Dict[str, Any]) -> None:
        if len(target) < bound:
            raise ValidationError(bound, len(target))

    return check


def max_properties(value: Any) -> Predicate:
    bound = require_count("maxProperties", value)

    def check(target: Dict[str, Any]) -> None:
        if len(target) > bound:
            raise ValidationError(bound, len(target))

    return check


def property_names(value: Any) -> Predicate:
    # Imported here: the compiler itself imports the registries.
    from schema_compiler.compiler.compile import compile_keywords

    raw = require_mapping("propertyNames", value)
    schema = compile_keywords(ValueType.string, raw)

    def check(target: Dict[str, Any]) -> None:
        for name in target:
            try:
                validate_node(schema, name)
            except ValidationError as exc:
                exc.at(name)
                raise

    return check


def pattern_properties(value: Any) -> Predicate:
    raw = require_mapping("patternProperties", value)
    compiled: List[Tuple["re.Pattern[str]", Schema]] = [
        (
            compile_pattern("patternProperties", pattern),
            compile_subschema(f"patternProperties.{pattern}", subschema),
        )
        for pattern, subschema in raw.items()
    ]

    def check(target: Dict[str, Any]) -> None:
        for name, element in target.items():
            for regex, schema in compiled:
                if regex.search(name) is None:
                    continue
                try:
                    validate_node(schema, element)
                except ValidationError as exc:
                    exc.at(name)
                    raise

    return check


OBJECT_KEYWORDS: Mapping[str, KeywordBuilder] = MappingProxyType(
    {
        "properties": KeywordBuilder(properties),
        "required": KeywordBuilder(required),
        "dependentRequired": KeywordBuilder(dependent_required),
        "minProperties": KeywordBuilder(min_properties),
        "maxProperties": KeywordBuilder(max_properties),
        "propertyNames": KeywordBuilder(property_names),
        "patternProperties": KeywordBuilder(pattern_properties),
    }
)
