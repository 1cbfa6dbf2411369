"""
Compiled schema tree and the building blocks the keyword registries produce.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from schema_compiler.schema.types import ValueType

# Decoded JSON values. Kept non-recursive, same as the raw schema alias.
JSONPrimitive = Union[str, int, float, bool, None]
JSONValue = Union[JSONPrimitive, Dict[str, Any], List[Any]]
RawSchema = Mapping[str, Any]

# A predicate returns None when the target satisfies the keyword and raises
# ValidationError otherwise.
Predicate = Callable[[Any], None]
BuildFunction = Callable[..., Predicate]


@dataclass(frozen=True)
class KeywordBuilder:
    """
    Builds the predicate for one keyword.

    `requires` names sibling keywords whose raw values are passed to `build`
    after the keyword's own value, in the listed order.
    """

    build: BuildFunction
    requires: Tuple[str, ...] = ()


def _empty_properties() -> Mapping[str, "Schema"]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Schema:
    value_type: ValueType
    keyword_validators: Tuple[Tuple[str, Predicate], ...] = ()
    properties: Mapping[str, "Schema"] = field(default_factory=_empty_properties)

    @property
    def keywords(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.keyword_validators)

    def validator_for(self, keyword: str) -> Optional[Predicate]:
        for name, predicate in self.keyword_validators:
            if name == keyword:
                return predicate
        return None
