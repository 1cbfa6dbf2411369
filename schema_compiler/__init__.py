"""
Public entrypoint for compiling schemas and validating data against them.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from schema_compiler.compiler.compile import compile_schema
from schema_compiler.errors import (
    SchemaCompilerError,
    SchemaConfigurationError,
    SourceError,
    TypeMismatchError,
    ValidationError,
)
from schema_compiler.runtime import engine
from schema_compiler.schema.models import Schema
from schema_compiler.schema.types import ValueType
from schema_compiler.sources.loader import load_schema, load_target


def validate(target: Any, schema: Any, *, client: Optional[httpx.Client] = None) -> None:
    """
    Validate a target against a schema, raising on the first failure.

    `target` may be decoded JSON data, a native record, or a JSON literal /
    file path / URL given as str or bytes. `schema` may be a compiled Schema,
    a raw mapping, or a str/bytes source resolved the same way.

    Raises:
        ValidationError: the target violates the schema (TypeMismatchError
            for a declared-type mismatch).
        SchemaConfigurationError: the schema cannot be compiled.
        SourceError: a source could not be fetched, read or decoded.
    """

    compiled = load_schema(schema, client=client)
    data = load_target(target, client=client)
    engine.validate_node(compiled, data)


def is_valid(target: Any, schema: Any, *, client: Optional[httpx.Client] = None) -> bool:
    """Boolean form of `validate`; configuration and source errors still raise."""

    try:
        validate(target, schema, client=client)
    except ValidationError:
        return False
    return True


__all__ = [
    "Schema",
    "SchemaCompilerError",
    "SchemaConfigurationError",
    "SourceError",
    "TypeMismatchError",
    "ValidationError",
    "ValueType",
    "compile_schema",
    "is_valid",
    "validate",
]
