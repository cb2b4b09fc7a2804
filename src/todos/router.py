from __future__ import annotations

import json
import logging
from inspect import isawaitable
from typing import Any, Dict, Optional, Tuple

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from graphql import GraphQLError, GraphQLSchema, execute, parse, validate

from .errors import InvalidArgument

logger = logging.getLogger(__name__)


def _error_payload(*errors: GraphQLError) -> Dict[str, Any]:
    """Payload for a request that never executed; errors are tagged as invalid arguments."""
    for error in errors:
        if not (error.extensions or {}).get("code"):
            error.extensions = {**(error.extensions or {}), "code": InvalidArgument.code}
    return {"data": None, "errors": [error.formatted for error in errors]}


def _parse_variables(raw: Any) -> Optional[Dict[str, Any]]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            raise GraphQLError("Variables are invalid JSON.") from exc
    if not isinstance(raw, dict):
        raise GraphQLError("Variables must be an object.")
    return raw


def _require_optional_str(value: Any, message: str) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise GraphQLError(message)
    return value


async def run_query(
    schema: GraphQLSchema,
    query: Optional[str],
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
) -> Tuple[int, Dict[str, Any]]:
    """Parse, validate and execute one request; returns (http status, payload)."""
    if not query:
        return status.HTTP_400_BAD_REQUEST, _error_payload(GraphQLError("Must provide query string."))

    try:
        document = parse(query)
    except GraphQLError as exc:
        return status.HTTP_400_BAD_REQUEST, _error_payload(exc)

    validation_errors = validate(schema, document)
    if validation_errors:
        return status.HTTP_400_BAD_REQUEST, _error_payload(*validation_errors)

    result = execute(schema, document, variable_values=variables, operation_name=operation_name)
    if isawaitable(result):
        result = await result

    if result.errors:
        for error in result.errors:
            logger.info(f"GraphQL error at {error.path}: {error.message}")
    # No data means execution never started (bad variables, unknown operation).
    if result.data is None:
        return status.HTTP_400_BAD_REQUEST, _error_payload(*(result.errors or []))
    return status.HTTP_200_OK, result.formatted


def build_router(schema: GraphQLSchema, path: str = "/graphql") -> APIRouter:
    router = APIRouter(tags=["GraphQL"])

    @router.get(path, summary="Run a GraphQL query or mutation from query parameters")
    async def graphql_get(request: Request) -> JSONResponse:
        params = request.query_params
        try:
            variables = _parse_variables(params.get("variables"))
        except GraphQLError as exc:
            return JSONResponse(_error_payload(exc), status_code=status.HTTP_400_BAD_REQUEST)
        code, payload = await run_query(
            schema,
            params.get("query"),
            variables,
            params.get("operationName"),
        )
        return JSONResponse(payload, status_code=code)

    @router.post(path, summary="Run a GraphQL query or mutation")
    async def graphql_post(request: Request) -> JSONResponse:
        content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
        try:
            if content_type == "application/graphql":
                try:
                    query = (await request.body()).decode("utf-8")
                except UnicodeDecodeError as exc:
                    raise GraphQLError("POST body is not valid UTF-8.") from exc
                variables, operation_name = None, None
            else:
                try:
                    body = await request.json()
                except ValueError as exc:
                    raise GraphQLError("POST body is not valid JSON.") from exc
                if not isinstance(body, dict):
                    raise GraphQLError("POST body must be a JSON object.")
                query = _require_optional_str(body.get("query"), "Query must be a string.")
                variables = _parse_variables(body.get("variables"))
                operation_name = _require_optional_str(
                    body.get("operationName"), "Operation name must be a string."
                )
        except GraphQLError as exc:
            return JSONResponse(_error_payload(exc), status_code=status.HTTP_400_BAD_REQUEST)

        code, payload = await run_query(schema, query, variables, operation_name)
        return JSONResponse(payload, status_code=code)

    return router
