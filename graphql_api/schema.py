"""Main GraphQL schema factory.

The Query and Mutation root types are defined in app.py next to the
dependency wiring, so the factory imports them lazily.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all resolvers.

    Returns:
        Configured Strawberry Schema instance
    """
    # Import here to avoid circular dependency
    from app import Query, Mutation

    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
    )
