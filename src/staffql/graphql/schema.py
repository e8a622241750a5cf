"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig
from strawberry.types import ExecutionContext

from ..errors import StaffQLError, StorageError
from ..logging import get_logger
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class StaffQLSchema(strawberry.Schema):
    """Schema that reports resolver errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if original is None:
                # Parse and validation errors from the document itself
                logger.info("GraphQL request invalid", error=error.message)
            elif isinstance(original, StaffQLError) and not isinstance(original, StorageError):
                # Expected outcomes such as NOT_FOUND are not server faults
                logger.info(
                    "GraphQL operation rejected",
                    code=original.code,
                    error=error.message,
                    path=error.path,
                )
            else:
                logger.error(
                    "GraphQL execution error",
                    error=error.message,
                    path=error.path,
                    exc_info=original,
                )


# Field names are exposed exactly as declared (first_name, not firstName)
schema = StaffQLSchema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(auto_camel_case=False),
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(graphiql: bool = False) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Services are read from ``app.state``, which the application lifespan
    populates, so the router itself holds no connection state.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        state = request.app.state
        return build_context(
            repository=state.repository,
            password_hasher=state.password_hasher,
            token_issuer=state.token_issuer,
            request=request,
        )

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
