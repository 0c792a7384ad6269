"""
Devices UI test suite: configuration.

Defines environment-specific configuration classes for the suite.  Each
class captures the URLs of the devices client app and its REST API, plus
the bounded wait times used when synchronising with the browser and the
network.  The ``get_config`` factory selects the right class based on the
``DEVICES_ENV`` environment variable (or an explicit key).
"""

from __future__ import annotations

import os


class Config:
    """
    Base (shared) configuration for the suite.

    Individual settings can be overridden by environment variables so the
    same suite runs against a local stack, a CI stack, or a remote one.
    """

    # Web client rendering the devices list and the add-device form.
    CLIENT_APP_URL: str = os.environ.get("CLIENT_APP_URL", "http://localhost:3001")

    # REST API backing the client (serves /devices/).
    SERVER_API_URL: str = os.environ.get("SERVER_API_URL", "http://localhost:3000")

    # Seconds the directory client waits for a single HTTP response.
    API_TIMEOUT: int = int(os.environ.get("API_TIMEOUT", "10"))

    # Milliseconds to wait for an observed request to complete in the browser.
    REQUEST_WAIT_TIMEOUT_MS: int = int(os.environ.get("REQUEST_WAIT_TIMEOUT_MS", "10000"))

    # Milliseconds to wait for the device rows after a load or reload.
    PAGE_READY_TIMEOUT_MS: int = int(os.environ.get("PAGE_READY_TIMEOUT_MS", "10000"))

    # Seconds to poll the stack before giving up on it.
    HEALTH_TIMEOUT: int = int(os.environ.get("HEALTH_TIMEOUT", "60"))

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    """Local runs against a stack started by hand."""

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class CIConfig(Config):
    """
    CI overrides.

    Shared runners are slower to boot browsers and to reach the stack, so the
    bounded waits are longer.
    """

    REQUEST_WAIT_TIMEOUT_MS: int = int(os.environ.get("REQUEST_WAIT_TIMEOUT_MS", "20000"))
    PAGE_READY_TIMEOUT_MS: int = int(os.environ.get("PAGE_READY_TIMEOUT_MS", "20000"))
    HEALTH_TIMEOUT: int = int(os.environ.get("HEALTH_TIMEOUT", "180"))


class TestingConfig(Config):
    """
    Unit-test overrides.

    Points both URLs at non-routable test hosts so that unit tests never
    accidentally hit a real stack.
    """

    __test__ = False

    CLIENT_APP_URL: str = os.environ.get("TEST_CLIENT_APP_URL", "http://client.test")
    SERVER_API_URL: str = os.environ.get("TEST_SERVER_API_URL", "http://api.test")
    API_TIMEOUT: int = 1
    REQUEST_WAIT_TIMEOUT_MS: int = 1000
    PAGE_READY_TIMEOUT_MS: int = 1000
    HEALTH_TIMEOUT: int = 1


# Lookup table mapping environment name strings to their config classes.
config = {
    "development": DevelopmentConfig,
    "ci": CIConfig,
    "testing": TestingConfig,
    "default": Config,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Return the configuration class for the given environment.

    Args:
        env: One of ``"development"``, ``"ci"`` or ``"testing"``.  When
            *None*, the ``DEVICES_ENV`` environment variable is consulted.

    Returns:
        The ``Config`` subclass matching the requested environment, or the
        base ``Config`` if the key is unset or unrecognised.
    """
    if env is None:
        env = os.environ.get("DEVICES_ENV", "default")
    return config.get(env, config["default"])
