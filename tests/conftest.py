"""
Shared pytest fixtures for the devices test suite.

This module contains fixtures shared by every suite: configuration,
logging setup and test-data factories.  Browser and live-stack fixtures
live in the suite-specific conftest modules.
"""

import logging
from typing import Callable

import pytest

from config import Config, get_config
from shared.test_helpers import build_device_payload

logging.basicConfig(
    level=get_config().LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def settings() -> type[Config]:
    """
    Configuration for the current run, selected by ``DEVICES_ENV``.

    Returns:
        The active ``Config`` class.
    """
    return get_config()


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def device_payload() -> dict[str, str]:
    """
    Provide a unique create-device payload.

    Returns:
        Dictionary with ``system_name``, ``type`` and ``hdd_capacity``.
    """
    return build_device_payload()


@pytest.fixture
def device_payload_factory() -> Callable[..., dict[str, str]]:
    """
    Factory for create-device payloads with selected fields pinned.

    Example:
        def test_something(device_payload_factory):
            payload = device_payload_factory(type="MAC")
    """
    return build_device_payload
