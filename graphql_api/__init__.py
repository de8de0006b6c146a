"""GraphQL surface (strawberry) for the identity backend."""
