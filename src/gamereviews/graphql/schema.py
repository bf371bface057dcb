"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..logging import get_logger
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema cannot be built or introspected."""


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        SchemaValidationError: If the schema is invalid or has unresolved types
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        message = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=message)
        raise SchemaValidationError(f"GraphQL schema validation failed: {message}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        message = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=message)
        raise SchemaValidationError(f"GraphQL introspection failed: {message}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The data store is read from ``request.app.state.store`` for every operation.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        return build_context(request.app.state.store, request=request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
