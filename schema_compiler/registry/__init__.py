"""
Per-type keyword registries.

Each registry maps a keyword name to the KeywordBuilder that compiles it. The
tables are read-only and built once at import time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from schema_compiler.registry.array_keywords import ARRAY_KEYWORDS
from schema_compiler.registry.integer_keywords import INTEGER_KEYWORDS
from schema_compiler.registry.number_keywords import NUMBER_KEYWORDS
from schema_compiler.registry.object_keywords import OBJECT_KEYWORDS
from schema_compiler.registry.string_keywords import STRING_KEYWORDS
from schema_compiler.schema.models import KeywordBuilder
from schema_compiler.schema.types import ValueType

_EMPTY: Mapping[str, KeywordBuilder] = MappingProxyType({})

KEYWORD_REGISTRIES: Mapping[ValueType, Mapping[str, KeywordBuilder]] = MappingProxyType(
    {
        ValueType.string: STRING_KEYWORDS,
        ValueType.integer: INTEGER_KEYWORDS,
        ValueType.number: NUMBER_KEYWORDS,
        ValueType.array: ARRAY_KEYWORDS,
        ValueType.object: OBJECT_KEYWORDS,
    }
)


def get_registry(value_type: ValueType) -> Mapping[str, KeywordBuilder]:
    """Keyword registry for a type; booleans and nulls have no keywords."""
    return KEYWORD_REGISTRIES.get(value_type, _EMPTY)


__all__ = ["KEYWORD_REGISTRIES", "get_registry"]
