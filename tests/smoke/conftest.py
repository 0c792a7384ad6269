"""
Smoke-test fixtures for the devices stack.

Provides the ``smoke_urls`` session-scoped fixture that yields the client
and API URLs of a ready stack shared across the smoke suite.  Resolution is
delegated to :func:`shared.live_stack.live_stack_urls`, which uses the
configured stack or skips the suite when none is reachable.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from config import Config
from shared.live_stack import live_stack_urls


@pytest.fixture(scope="session")
def smoke_urls(settings: type[Config]) -> Generator[tuple[str, str], None, None]:
    """Yield ``(client_url, api_url)`` for smoke tests."""
    yield from live_stack_urls(
        client_url=settings.CLIENT_APP_URL,
        api_url=settings.SERVER_API_URL,
        suite_name="smoke",
        health_timeout=settings.HEALTH_TIMEOUT,
    )
