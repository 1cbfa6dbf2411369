from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, Dict, Iterable, Mapping

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from schema_compiler.errors import ValidationError
from schema_compiler.logger import get_logger
from schema_compiler.runtime.engine import validate_node
from schema_compiler.schema.models import Schema
from schema_compiler.sources.loader import load_schema

logger = get_logger("schema_compiler.integrations.fastapi")

DEFAULT_METHODS = ("POST", "PUT", "PATCH")


def _normalize_path(path: str) -> str:
    return path.rstrip("/") or "/"


def _decode_body(body: bytes) -> Any:
    return json.loads(body)


def _error_content(exc: ValidationError) -> Dict[str, Any]:
    return {"detail": str(exc), "keyword": exc.keyword, "path": exc.location}


class SchemaValidationMiddleware(BaseHTTPMiddleware):
    """Validates JSON request bodies against per-path schemas before routing."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        schemas: Mapping[str, Any],
        methods: Iterable[str] = DEFAULT_METHODS,
    ) -> None:
        super().__init__(app)
        if not schemas:
            raise ValueError("schemas is required for SchemaValidationMiddleware")

        # Compiled once; the trees are shared by every request.
        self._schemas: Dict[str, Schema] = {
            _normalize_path(path): load_schema(schema) for path, schema in schemas.items()
        }
        self._methods = {method.upper() for method in methods}

    async def dispatch(self, request: Request, call_next):
        schema = self._schema_for(request)
        if schema is None:
            return await call_next(request)

        body = await request.body()
        try:
            data = _decode_body(body)
        except ValueError as exc:
            return JSONResponse(status_code=400, content={"detail": f"Invalid JSON body: {exc}"})

        try:
            validate_node(schema, data)
        except ValidationError as exc:
            logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
            return JSONResponse(status_code=400, content=_error_content(exc))

        return await call_next(request)

    def _schema_for(self, request: Request) -> Schema | None:
        if request.method.upper() not in self._methods:
            return None
        path = request.scope.get("path") or request.url.path
        return self._schemas.get(_normalize_path(path))


def validate_body(schema: Any) -> Callable[[Request], Awaitable[Any]]:
    """
    Route dependency that validates the JSON body and returns it decoded.

    Usage:
        @app.post("/items")
        async def create(payload: dict = Depends(validate_body(ITEM_SCHEMA))):
            ...
    """

    compiled = load_schema(schema)

    async def dependency(request: Request) -> Any:
        body = await request.body()
        try:
            data = _decode_body(body)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=f"Invalid JSON body: {exc}") from exc
        try:
            validate_node(compiled, data)
        except ValidationError as exc:
            logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return data

    return dependency
