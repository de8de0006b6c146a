from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Final, Any

# Third-party
import strawberry
from dotenv import load_dotenv
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

# Load .env before reading any configuration
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

# Local application imports
from application.user.handlers.apple_identifier_linked_handler import (  # noqa: E402
    AppleIdentifierLinkedHandler,
)
from application.user.handlers.user_created_handler import UserCreatedHandler  # noqa: E402
from application.user.orchestrators.sign_in_orchestrator import (  # noqa: E402
    SignInOrchestrator,
)
from application.user.services.identity_resolver import IdentityResolver  # noqa: E402
from domain.user.core.events.apple_identifier_linked import AppleIdentifierLinked  # noqa: E402
from domain.user.core.events.user_created import UserCreated  # noqa: E402
from graphql_api.context import create_context  # noqa: E402
from graphql_api.resolvers.user.mutations import UserMutations  # noqa: E402
from graphql_api.resolvers.user.queries import UserQueries  # noqa: E402
from infrastructure.events.in_memory_bus import InMemoryEventBus  # noqa: E402
from infrastructure.persistence.document_store_factory import get_document_store  # noqa: E402
from infrastructure.user.document_user_repository import DocumentUserRepository  # noqa: E402

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Version from env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")


@strawberry.type
class Query:
    @strawberry.field(description="User domain queries")  # type: ignore[misc]
    def user(self) -> UserQueries:
        """User lookups.

        Example:
            query {
              user {
                byId(userId: "001234.abcd.0912") { email appleIdentifier }
              }
            }
        """
        return UserQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="User domain mutations")  # type: ignore[misc]
    def user(self) -> UserMutations:
        """User mutations for provider sign-in.

        Example:
            mutation {
              user {
                signIn(credential: {...}) { userId appleIdentifier }
              }
            }
        """
        return UserMutations()


# Use create_schema() to keep a single schema entry point
from graphql_api.schema import create_schema  # noqa: E402

schema = create_schema()

__all__: list[str] = []


# ============================================
# Dependency wiring
# ============================================

# Store selection is environment based:
# - DOCUMENT_STORE: "inmemory" (default) | "mongodb"
_document_store = get_document_store()
_user_repository = DocumentUserRepository(_document_store)
_identity_resolver = IdentityResolver(_user_repository)

_event_bus = InMemoryEventBus()
_event_bus.subscribe(UserCreated, UserCreatedHandler().handle)
_event_bus.subscribe(AppleIdentifierLinked, AppleIdentifierLinkedHandler().handle)

_sign_in_orchestrator = SignInOrchestrator(_identity_resolver, _event_bus)


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:
    """Application lifecycle: store indexes on startup, client close on shutdown."""
    logger = _logging.getLogger("startup")

    logger.info(
        "lifespan.startup",
        extra={
            "document_store": type(_document_store).__name__,
            "version": APP_VERSION,
        },
    )

    db = getattr(_document_store, "db", None)
    if db is not None:
        from infrastructure.persistence.mongodb.indexes import create_user_indexes

        await create_user_indexes(db)
        logger.info("lifespan.mongodb_ready", extra={"status": "indexes_ready"})

    logger.info("lifespan.ready", extra={"status": "serving"})
    yield

    logger.info("lifespan.shutdown", extra={"status": "cleanup"})
    close = getattr(_document_store, "close", None)
    if close is not None:
        await close()


app = FastAPI(
    title="CardWizz Identity Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context() -> Any:
    """Create GraphQL context with all dependencies.

    Uses the process-wide singletons wired above.
    """
    return create_context(
        user_repository=_user_repository,
        sign_in_orchestrator=_sign_in_orchestrator,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
