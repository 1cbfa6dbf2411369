"""
Flatten native Python records into the generic decoded-value model.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from schema_compiler.errors import SourceError

_DECODED_TYPES = (str, int, float, bool, type(None), list, dict)


def to_generic(value: Any) -> Any:
    """
    Return `value` as decoded JSON data.

    Values already in the generic model pass through untouched. Pydantic
    models, dataclass instances and other mappings are serialised the way
    they would appear in a JSON payload.
    """

    if isinstance(value, _DECODED_TYPES):
        return value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, tuple):
        return to_generic(list(value))
    if isinstance(value, Mapping):
        value = dict(value)
    if isinstance(value, dict) or (dataclasses.is_dataclass(value) and not isinstance(value, type)):
        try:
            return to_jsonable_python(value)
        except PydanticSerializationError as exc:
            raise SourceError(f"Cannot convert {type(value).__name__} to JSON data: {exc}") from exc
    raise SourceError(f"Unsupported target type {type(value).__name__}")
