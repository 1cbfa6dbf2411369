from schema_compiler.schema.models import JSONValue, KeywordBuilder, Predicate, RawSchema, Schema
from schema_compiler.schema.types import ValueType, get_value_type, kind_of

__all__ = [
    "JSONValue",
    "KeywordBuilder",
    "Predicate",
    "RawSchema",
    "Schema",
    "ValueType",
    "get_value_type",
    "kind_of",
]
