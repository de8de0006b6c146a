"""Tests for GetUserQuery."""

import pytest

from application.user.queries.get_user import GetUserQuery
from domain.user.core.value_objects.user_id import UserId


@pytest.fixture
def query(repository):
    """Create GetUserQuery on the recording store."""
    return GetUserQuery(repository=repository)


@pytest.mark.asyncio
async def test_by_id_returns_user(query, store):
    """Test by_id returns the stored user."""
    await store.seed("u1", {"email": "a@x.com", "appleIdentifier": "apple-u1"})

    user = await query.by_id(UserId("u1"))

    assert user is not None
    assert user.user_id == UserId("u1")
    assert user.email == "a@x.com"
    assert user.apple_identifier == "apple-u1"


@pytest.mark.asyncio
async def test_by_id_returns_none_when_missing(query):
    """Test by_id returns None for unknown id."""
    assert await query.by_id(UserId("missing")) is None


@pytest.mark.asyncio
async def test_by_apple_identifier_returns_user(query, store):
    """Test lookup by provider identifier."""
    await store.seed("u1", {"email": "a@x.com", "appleIdentifier": "apple-u1"})

    user = await query.by_apple_identifier("apple-u1")

    assert user is not None
    assert user.user_id == UserId("u1")


@pytest.mark.asyncio
async def test_by_apple_identifier_returns_none_when_missing(query):
    """Test lookup by unknown provider identifier."""
    assert await query.by_apple_identifier("apple-zzz") is None


@pytest.mark.asyncio
async def test_queries_never_write(query, store):
    """Test read path performs no writes."""
    await store.seed("u1", {"email": "a@x.com", "appleIdentifier": "apple-u1"})

    await query.by_id(UserId("u1"))
    await query.by_apple_identifier("apple-u1")

    assert store.writes == []
