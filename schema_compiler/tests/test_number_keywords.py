from __future__ import annotations

import pytest

from schema_compiler.compiler import compile_schema
from schema_compiler.errors import SchemaConfigurationError, ValidationError
from schema_compiler.runtime.engine import is_valid_node, validate_node


def test_minimum_and_maximum_are_inclusive() -> None:
    schema = compile_schema({"type": "number", "minimum": 1.5, "maximum": 3})

    assert is_valid_node(schema, 1.5)
    assert is_valid_node(schema, 3)
    assert not is_valid_node(schema, 1.49)
    assert not is_valid_node(schema, 3.01)


def test_exclusive_maximum_rejects_the_bound() -> None:
    schema = compile_schema({"type": "number", "exclusiveMaximum": 5})

    assert not is_valid_node(schema, 5)
    assert is_valid_node(schema, 4.999)


def test_exclusive_minimum_rejects_the_bound() -> None:
    schema = compile_schema({"type": "number", "exclusiveMinimum": 0})

    assert not is_valid_node(schema, 0)
    assert is_valid_node(schema, 0.001)


def test_bound_error_reports_bound_and_value() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_node(compile_schema({"type": "number", "maximum": 10}), 12.5)

    assert excinfo.value.keyword == "maximum"
    assert excinfo.value.expected == 10
    assert excinfo.value.got == 12.5


def test_multiple_of_allows_fractional_divisors() -> None:
    schema = compile_schema({"type": "number", "multipleOf": 0.5})

    assert is_valid_node(schema, 1.5)
    assert is_valid_node(schema, 4)
    assert not is_valid_node(schema, 1.25)


def test_zero_divisor_is_configuration_error() -> None:
    with pytest.raises(SchemaConfigurationError) as excinfo:
        compile_schema({"type": "number", "multipleOf": 0})

    assert "multipleOf" in str(excinfo.value)


@pytest.mark.parametrize("keyword", ["minimum", "maximum", "exclusiveMinimum", "exclusiveMaximum", "multipleOf"])
def test_non_numeric_bound_is_configuration_error(keyword: str) -> None:
    with pytest.raises(SchemaConfigurationError) as excinfo:
        compile_schema({"type": "number", keyword: "5"})

    assert keyword in str(excinfo.value)


def test_boolean_bound_is_configuration_error() -> None:
    with pytest.raises(SchemaConfigurationError):
        compile_schema({"type": "number", "minimum": True})


def test_multiple_of_beyond_float_quotient_range() -> None:
    schema = compile_schema({"type": "number", "multipleOf": 0.5})

    assert is_valid_node(schema, 1e308)
    assert is_valid_node(schema, 10**400)
    assert not is_valid_node(schema, float("inf"))
    assert not is_valid_node(compile_schema({"type": "number", "multipleOf": 3}), 10**400)


def test_targets_beyond_float_range_are_compared_exactly() -> None:
    schema = compile_schema({"type": "number", "minimum": 0, "maximum": 1e308})

    assert not is_valid_node(schema, -(10**400))

    with pytest.raises(ValidationError) as excinfo:
        validate_node(schema, 10**400)

    assert excinfo.value.keyword == "maximum"
    assert excinfo.value.got == 10**400


@pytest.mark.parametrize("bound", [10**400, float("inf"), float("nan")])
def test_unrepresentable_bound_is_configuration_error(bound: float) -> None:
    with pytest.raises(SchemaConfigurationError) as excinfo:
        compile_schema({"type": "number", "maximum": bound})

    assert "maximum" in str(excinfo.value)
