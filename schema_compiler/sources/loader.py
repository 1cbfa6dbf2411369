"""
Resolve schema and target inputs into decoded JSON values.

A string (or byte) source is, in order of precedence:
  - an http(s) URL, fetched with httpx
  - the path of an existing file, read as UTF-8
  - literal JSON text
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlsplit

import httpx

from schema_compiler.compiler.compile import compile_schema
from schema_compiler.config import config
from schema_compiler.errors import SchemaConfigurationError, SourceError
from schema_compiler.logger import get_logger
from schema_compiler.schema.models import Schema
from schema_compiler.sources.adapters import to_generic

logger = get_logger(__name__)

Source = Union[str, bytes, bytearray]


def is_url(text: str) -> bool:
    parts = urlsplit(text.strip())
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def _is_file(text: str) -> bool:
    if "\n" in text or not text.strip():
        return False
    try:
        return Path(text).is_file()
    except (OSError, ValueError):
        # Name too long, embedded NUL, ...
        return False


def fetch_url(url: str, *, client: Optional[httpx.Client] = None) -> str:
    if not config.allow_remote_sources:
        raise SourceError(f"Remote sources are disabled; refusing to fetch {url}")

    logger.info("Fetching JSON from %s", url)
    owns_client = client is None
    if client is None:
        client = httpx.Client(
            timeout=config.http_timeout,
            verify=config.http_verify_ssl,
            follow_redirects=True,
        )
    try:
        response = client.get(url)
    except httpx.HTTPError as exc:
        raise SourceError(f"Failed to fetch {url}: {exc}") from exc
    finally:
        if owns_client:
            client.close()

    if response.is_error:
        raise SourceError(response.text or f"{url} returned HTTP {response.status_code}")
    return response.text


def read_file(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"Unable to read {path}: {exc}") from exc


def load_json(source: Source, *, client: Optional[httpx.Client] = None) -> Any:
    """Resolve a URL, file path or JSON literal into decoded JSON."""

    if isinstance(source, (bytes, bytearray)):
        try:
            text = bytes(source).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SourceError(f"Source bytes are not valid UTF-8: {exc}") from exc
    elif isinstance(source, str):
        text = source
    else:
        raise SourceError(f"Unsupported source type {type(source).__name__}; expected str or bytes")

    origin = "JSON literal"
    if is_url(text):
        origin = text.strip()
        text = fetch_url(origin, client=client)
    elif _is_file(text):
        origin = text
        text = read_file(text)

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SourceError(
            f"{origin} is not valid JSON ({exc.msg}) at line {exc.lineno} column {exc.colno}"
        ) from exc
    except ValueError as exc:
        # e.g. an integer literal past the interpreter's digit limit
        raise SourceError(f"{origin} is not valid JSON ({exc})") from exc


def load_target(target: Any, *, client: Optional[httpx.Client] = None) -> Any:
    if isinstance(target, (str, bytes, bytearray)):
        return load_json(target, client=client)
    return to_generic(target)


def load_schema(schema: Any, *, client: Optional[httpx.Client] = None) -> Schema:
    """Return a compiled Schema, compiling raw mappings and text sources on demand."""

    if isinstance(schema, Schema):
        return schema
    if isinstance(schema, (str, bytes, bytearray)):
        return compile_schema(load_json(schema, client=client))
    if isinstance(schema, Mapping):
        return compile_schema(schema)
    raise SchemaConfigurationError(f"unknown schema of type {type(schema).__name__}")
