"""Shared test fixtures.

The ``client`` fixture loads the full app for HTTP/GraphQL tests. Unit tests
never request it, so they don't import app.py.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import AsyncIterator

import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env first (default environment variables)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# The app wires its store at import time: tests always run in memory
os.environ["DOCUMENT_STORE"] = "inmemory"


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the ASGI app, with an empty user store."""
    import app as app_module

    clear = getattr(app_module._document_store, "clear", None)
    if clear is not None:
        clear()

    transport = ASGITransport(app=app_module.app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
