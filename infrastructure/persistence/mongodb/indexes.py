"""MongoDB indexes for the users collection.

Shared by the application lifespan and ``scripts/setup_mongodb_indexes.py``.
"""

from typing import Any, Dict
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from infrastructure.user.document_user_repository import (
    APPLE_IDENTIFIER_FIELD,
    EMAIL_FIELD,
    USERS_COLLECTION,
)

logger = logging.getLogger(__name__)


async def create_user_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    """Create indexes for users collection.

    Indexes:
    - _id: unique user id (automatic)
    - appleIdentifier: unique among non-empty values, so two users can
      never share a provider identifier and concurrent creates collide
    - email: non-unique, lookup for account reconciliation
    """
    collection = db[USERS_COLLECTION]
    logger.info(f"Creating indexes for '{USERS_COLLECTION}' collection...")

    await collection.create_index(
        [(APPLE_IDENTIFIER_FIELD, 1)],
        name="idx_apple_identifier_unique",
        unique=True,
        partialFilterExpression={APPLE_IDENTIFIER_FIELD: {"$gt": ""}},
    )
    logger.info(f"  Created unique partial index: {APPLE_IDENTIFIER_FIELD}")

    await collection.create_index(
        [(EMAIL_FIELD, 1)],
        name="idx_email",
    )
    logger.info(f"  Created index: {EMAIL_FIELD}")
