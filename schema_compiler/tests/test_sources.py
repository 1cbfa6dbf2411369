from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import List

import httpx
import pytest
from pydantic import BaseModel

from schema_compiler import is_valid, validate
from schema_compiler.compiler import compile_schema
from schema_compiler.config import config
from schema_compiler.errors import SchemaConfigurationError, SourceError, ValidationError
from schema_compiler.sources import load_json, load_schema, load_target, to_generic

SCHEMA = {"type": "object", "required": ["name"], "properties": {"name": {"type": "string", "minLength": 2}}}


def _client(routes: dict[str, httpx.Response]) -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        return routes.get(str(request.url), httpx.Response(404, text="not found"))

    return httpx.Client(transport=httpx.MockTransport(handler))


class Owner(BaseModel):
    name: str


class Record(BaseModel):
    name: str
    owner: Owner
    tags: List[str] = []


@dataclass
class Event:
    name: str
    day: date
    labels: List[str] = field(default_factory=list)


def test_load_json_literal_and_bytes() -> None:
    assert load_json('{"a": [1, 2]}') == {"a": [1, 2]}
    assert load_json(b'"text"') == "text"
    assert load_json(bytearray(b"null")) is None


def test_load_json_reads_files(tmp_path: Path) -> None:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(SCHEMA), encoding="utf-8")

    assert load_json(str(path)) == SCHEMA


def test_load_json_fetches_urls() -> None:
    client = _client({"https://example.com/schema.json": httpx.Response(200, json=SCHEMA)})

    assert load_json("https://example.com/schema.json", client=client) == SCHEMA


def test_error_response_raises_source_error_with_body() -> None:
    client = _client({})

    with pytest.raises(SourceError) as excinfo:
        load_json("https://example.com/missing.json", client=client)

    assert "not found" in str(excinfo.value)


def test_network_error_raises_source_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))

    with pytest.raises(SourceError) as excinfo:
        load_json("http://example.com/schema.json", client=client)

    assert "connection refused" in str(excinfo.value)


def test_remote_sources_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "allow_remote_sources", False)
    client = _client({"https://example.com/schema.json": httpx.Response(200, json=SCHEMA)})

    with pytest.raises(SourceError) as excinfo:
        load_json("https://example.com/schema.json", client=client)

    assert "disabled" in str(excinfo.value)


def test_invalid_json_raises_source_error() -> None:
    with pytest.raises(SourceError) as excinfo:
        load_json("{not json")

    assert "not valid JSON" in str(excinfo.value)


def test_unsupported_source_type() -> None:
    with pytest.raises(SourceError):
        load_json(42)  # type: ignore[arg-type]


def test_load_schema_accepts_compiled_raw_and_text() -> None:
    compiled = compile_schema(SCHEMA)

    assert load_schema(compiled) is compiled
    assert load_schema(SCHEMA).keywords == compiled.keywords
    assert load_schema(json.dumps(SCHEMA)).keywords == compiled.keywords


def test_load_schema_rejects_unknown_schema_kind() -> None:
    with pytest.raises(SchemaConfigurationError):
        load_schema(5)


def test_load_target_decodes_text_and_passes_data_through() -> None:
    data = {"name": "ada"}

    assert load_target(data) is data
    assert load_target('{"name": "ada"}') == data


def test_to_generic_flattens_pydantic_models() -> None:
    record = Record(name="job", owner=Owner(name="ops"), tags=["a"])

    assert to_generic(record) == {"name": "job", "owner": {"name": "ops"}, "tags": ["a"]}


def test_to_generic_flattens_dataclasses_and_mappings() -> None:
    event = Event(name="launch", day=date(2024, 1, 2), labels=["x"])

    assert to_generic(event) == {"name": "launch", "day": "2024-01-02", "labels": ["x"]}
    assert to_generic(MappingProxyType({"a": (1, 2)})) == {"a": [1, 2]}
    assert to_generic((1, "a")) == [1, "a"]


def test_to_generic_rejects_unknown_values() -> None:
    with pytest.raises(SourceError):
        to_generic(object())


def test_validate_native_records() -> None:
    validate(Record(name="job", owner=Owner(name="ops")), SCHEMA)
    validate(
        Event(name="launch", day=date(2024, 1, 2)),
        {"type": "object", "properties": {"day": {"type": "string", "format": "date"}}},
    )

    assert not is_valid(Record(name="j", owner=Owner(name="ops")), SCHEMA)


def test_validate_from_files(tmp_path: Path) -> None:
    schema_path = tmp_path / "schema.json"
    schema_path.write_text(json.dumps(SCHEMA), encoding="utf-8")
    good = tmp_path / "good.json"
    good.write_text('{"name": "ada"}', encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text("{}", encoding="utf-8")

    validate(str(good), str(schema_path))

    with pytest.raises(ValidationError) as excinfo:
        validate(str(bad), str(schema_path))

    assert excinfo.value.keyword == "required"


def test_validate_from_url() -> None:
    client = _client(
        {
            "https://example.com/schema.json": httpx.Response(200, json=SCHEMA),
            "https://example.com/target.json": httpx.Response(200, json={"name": "x"}),
        }
    )

    assert is_valid("https://example.com/target.json", "https://example.com/schema.json", client=client) is False


def test_is_valid_still_raises_configuration_errors() -> None:
    with pytest.raises(SchemaConfigurationError):
        is_valid({}, {"type": "unknown"})


def test_integer_literals_beyond_float_range() -> None:
    validate("1" + "0" * 400, '{"type": "number", "minimum": 0}')

    assert not is_valid("-1" + "0" * 400, '{"type": "number", "minimum": 0}')


def test_integer_literal_past_digit_limit_is_source_error() -> None:
    with pytest.raises(SourceError) as excinfo:
        load_json("1" * 5000)

    assert "not valid JSON" in str(excinfo.value)
