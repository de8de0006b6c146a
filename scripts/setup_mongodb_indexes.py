"""Setup MongoDB indexes for the identity backend.

Creates the indexes the users collection relies on:
- appleIdentifier: unique among non-empty values
- email: lookup for account reconciliation

Usage:
    python scripts/setup_mongodb_indexes.py

Environment Variables:
    MONGODB_URI: MongoDB connection string (required)
    MONGODB_DATABASE: Database name (default: cardwizz)
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Dict, Any

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from infrastructure.config import get_mongodb_uri, get_mongodb_database
from infrastructure.persistence.mongodb.indexes import create_user_indexes
from infrastructure.user.document_user_repository import USERS_COLLECTION

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
    logging.debug(f"Loaded environment from: {env_path}")


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def list_existing_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    """List users collection indexes for verification.

    Args:
        db: MongoDB database instance
    """
    logger.info("Existing indexes on '%s':", USERS_COLLECTION)

    indexes = await db[USERS_COLLECTION].list_indexes().to_list(length=None)
    for idx in indexes:
        name = idx.get("name", "unknown")
        keys = idx.get("key", {})
        unique = " (unique)" if idx.get("unique", False) else ""
        keys_str = ", ".join(f"{k}:{v}" for k, v in keys.items())
        logger.info(f"  - {name}: [{keys_str}]{unique}")


async def setup_all_indexes() -> None:
    """Connect, create indexes, list them, close."""
    uri = get_mongodb_uri()
    if not uri:
        logger.error("MONGODB_URI not configured!")
        logger.error("Set MONGODB_URI environment variable with connection string.")
        sys.exit(1)

    database_name = get_mongodb_database()
    logger.info(f"Connecting to MongoDB: {database_name}")

    client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
    db = client[database_name]

    try:
        await client.admin.command("ping")
        logger.info("Connected to MongoDB successfully")

        await create_user_indexes(db)
        logger.info("All indexes created successfully")

        await list_existing_indexes(db)

    except Exception as e:
        logger.error(f"Error setting up indexes: {e}")
        sys.exit(1)

    finally:
        client.close()
        logger.info("MongoDB connection closed")


def main() -> None:
    """Main entry point."""
    try:
        asyncio.run(setup_all_indexes())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
