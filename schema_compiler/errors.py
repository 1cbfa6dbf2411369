"""
Shared exception hierarchy for the schema compiler.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

PathToken = Union[str, int]


class SchemaCompilerError(Exception):
    """Base class for all schema compiler related errors."""


class SchemaConfigurationError(SchemaCompilerError):
    """Raised when a raw schema cannot be compiled (bad keyword config, bad type, missing sibling)."""


class SourceError(SchemaCompilerError):
    """Raised when a schema or target cannot be acquired or decoded."""


class ValidationError(SchemaCompilerError):
    """
    Raised when a target violates a compiled schema.

    Predicates only know what they expected and what they saw; the engine that
    dispatched them attaches the keyword name. The keyword is assigned at most
    once, so the innermost dispatcher wins when the error bubbles up through
    nested schemas.
    """

    def __init__(self, expected: Any, got: Any, *, keyword: Optional[str] = None) -> None:
        self.expected = expected
        self.got = got
        self.keyword = keyword
        self.path: List[PathToken] = []
        super().__init__()

    def set_keyword(self, keyword: str) -> "ValidationError":
        if self.keyword is None:
            self.keyword = keyword
        return self

    def at(self, token: PathToken) -> "ValidationError":
        """Prepend a property name or array index to the error path."""
        self.path.insert(0, token)
        return self

    @property
    def location(self) -> str:
        location = "$"
        for token in self.path:
            if isinstance(token, int):
                location += f"[{token}]"
            else:
                location += f".{token}"
        return location

    def __str__(self) -> str:
        if self.keyword is None:
            detail = f"expected {self.expected}, got: {self.got}"
        else:
            detail = f"failed to validate {self.keyword}; got: {self.got}, expected: {self.expected}"
        return f"{self.location}: {detail}"


class TypeMismatchError(ValidationError):
    """Raised when a target's kind does not match the schema's declared type."""
