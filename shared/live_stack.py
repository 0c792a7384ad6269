"""Shared live-stack helpers for the smoke and E2E test suites."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Generator

import pytest
import requests

logger = logging.getLogger(__name__)


def _responds_ok(url: str, timeout: int = 2) -> bool:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def is_stack_ready(client_url: str, api_url: str, timeout: int = 2) -> bool:
    """Return True when both the client app and the devices API respond with 200."""
    return _responds_ok(client_url, timeout) and _responds_ok(
        f"{api_url}/devices/", timeout
    )


def wait_for_client_app_ready(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll the client app root until it serves 200 or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if _responds_ok(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Client app at {url} not ready after {timeout}s")


def wait_for_api_ready(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll the devices collection until it serves 200 or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if _responds_ok(f"{url}/devices/"):
            return
        time.sleep(interval)
    raise RuntimeError(f"Devices API at {url} not ready after {timeout}s")


def live_stack_urls(
    *,
    client_url: str,
    api_url: str,
    suite_name: str,
    health_timeout: int = 60,
) -> Generator[tuple[str, str], None, None]:
    """
    Yield ``(client_url, api_url)`` for a ready devices stack.

    Priority:
    1. Use URLs given explicitly through ``CLIENT_APP_URL``/``SERVER_API_URL``
       (and wait for them to become ready).
    2. Reuse an already-running stack at the configured URLs.
    3. Skip the suite when no stack is reachable.

    The suite never starts or stops the application itself.
    """
    if os.getenv("CLIENT_APP_URL") or os.getenv("SERVER_API_URL"):
        wait_for_client_app_ready(client_url, timeout=health_timeout)
        wait_for_api_ready(api_url, timeout=health_timeout)
        yield client_url, api_url
        return

    if not is_stack_ready(client_url, api_url):
        pytest.skip(
            f"no devices stack running at {client_url} / {api_url}; "
            f"set CLIENT_APP_URL and SERVER_API_URL to run {suite_name} tests"
        )

    logger.info("Reusing running devices stack at %s / %s", client_url, api_url)
    yield client_url, api_url
