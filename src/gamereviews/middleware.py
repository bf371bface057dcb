"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def operation_name_from_payload(data: dict[str, Any]) -> str | None:
    """Derive a loggable operation name from a GraphQL request payload.

    Prefers the explicit ``operationName``, then a named operation in the
    query text. Anonymous mutations are reported as ``mutation:anonymous``.
    """
    op = data.get("operationName")
    if isinstance(op, str) and op:
        return op

    query = data.get("query")
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _OPERATION_RE.search(query)
    if match:
        kind, name = match.groups()
        return f"mutation:{name}" if kind == "mutation" else name
    if query.lstrip().startswith("mutation"):
        return "mutation:anonymous"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        return operation_name_from_payload(dict(request.query_params))

    if request.method == "POST":
        body = await request.body()
        if not body:
            return None
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        return operation_name_from_payload(data)

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context(request.headers.get("x-request-id"))

        try:
            graphql_operation = await extract_graphql_operation_name(request)

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
