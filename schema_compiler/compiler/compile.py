"""
Compile raw schema mappings into immutable Schema trees.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, List, Mapping, Tuple

from schema_compiler.errors import SchemaConfigurationError
from schema_compiler.logger import get_logger
from schema_compiler.registry import get_registry
from schema_compiler.registry.object_keywords import PropertiesValidator
from schema_compiler.schema.models import KeywordBuilder, Predicate, RawSchema, Schema
from schema_compiler.schema.types import ValueType, get_value_type

logger = get_logger(__name__)


def compile_schema(raw: Any) -> Schema:
    """
    Compile a raw schema mapping.

    The `"type"` field selects the keyword registry; every recognised keyword
    is built in the order it appears in `raw` and unknown keys are ignored.
    For objects the compiled `properties` keyword also provides the node's
    property tree.
    """

    if not isinstance(raw, Mapping):
        raise SchemaConfigurationError(f"schema must be an object, got {type(raw).__name__}")

    value_type, ok = get_value_type(raw.get("type"))
    if not ok:
        raise SchemaConfigurationError(f"schema has wrong type: {raw.get('type')!r}")

    return compile_keywords(value_type, raw)


def compile_keywords(value_type: ValueType, raw: RawSchema) -> Schema:
    """Compile `raw` as a node of `value_type`, ignoring any `"type"` it declares."""

    validators = _build_validators(value_type, raw)

    properties: Mapping[str, Schema] = MappingProxyType({})
    if value_type == ValueType.object:
        for _, predicate in validators:
            if isinstance(predicate, PropertiesValidator):
                properties = predicate.schemas

    logger.debug(
        "Compiled %s schema with keywords %s",
        value_type.value,
        [name for name, _ in validators] or "[]",
    )
    return Schema(
        value_type=value_type,
        keyword_validators=tuple(validators),
        properties=properties,
    )


def _build_validators(value_type: ValueType, raw: RawSchema) -> List[Tuple[str, Predicate]]:
    registry = get_registry(value_type)
    validators: List[Tuple[str, Predicate]] = []
    for name, value in raw.items():
        builder = registry.get(name)
        if builder is None:
            continue
        validators.append((name, _build_keyword(name, builder, value, raw)))
    return validators


def _build_keyword(name: str, builder: KeywordBuilder, value: Any, raw: RawSchema) -> Predicate:
    siblings = []
    for required in builder.requires:
        if required not in raw:
            raise SchemaConfigurationError(f"{name} requires {required}")
        siblings.append(raw[required])
    return builder.build(value, *siblings)
