"""
Devices directory REST client.

A thin boundary around the devices REST resource.  The suite uses it to
read ground truth before asserting on the rendered page, and to perform
mutations (rename, delete) that would otherwise need a fragile UI flow.

The client classifies responses by status code only: any 2xx is a
success, anything else raises :class:`DevicesAPIError`.  It never retries
and never caches; deciding whether the *right* device changed is the
caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)


class DevicesAPIError(Exception):
    """Raised when the devices API answers with a non-2xx status."""

    def __init__(self, operation: str, status_code: int):
        self.operation = operation
        self.status_code = status_code
        super().__init__(
            f"Failed to {operation}. Received response code {status_code}"
        )


@dataclass(frozen=True)
class Device:
    """
    One device as reported by the directory.

    ``id`` and ``hdd_capacity`` are kept as strings: the suite compares
    them against text scraped from the page, and the server is free to
    send either numbers or strings.
    """

    id: str
    system_name: str
    type: str
    hdd_capacity: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Device":
        return cls(
            id=str(data["id"]),
            system_name=data["system_name"],
            type=data["type"],
            hdd_capacity=str(data["hdd_capacity"]),
        )


class DevicesAPI:
    """
    Client for the ``/devices`` REST resource.

    Attributes:
        base_url: Root URL of the devices API (no trailing slash).
        timeout: Seconds to wait for each response.
    """

    def __init__(self, base_url: str, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def get_devices(self) -> list[Device]:
        """Return every device currently stored in the directory."""
        response = self._request("GET", "/devices/", operation="retrieve devices")
        return [Device.from_json(item) for item in response.json()]

    def create_device(self, system_name: str, type: str, hdd_capacity: str) -> Device:
        """
        Create a device and return it as stored, including its new id.

        Args:
            system_name: Display name of the device.
            type: Device type (e.g. ``"MAC"``).
            hdd_capacity: Capacity in GB, without unit.
        """
        payload = {
            "system_name": system_name,
            "type": type,
            "hdd_capacity": str(hdd_capacity),
        }
        response = self._request(
            "POST", "/devices/", operation="create device", json=payload
        )
        return Device.from_json(response.json())

    def edit_device_details(
        self, device_id: str | int, new_name: str, type: str, capacity: str
    ) -> Device:
        """
        Replace the details of an existing device.

        The path parameter is the canonical identifier; the id is echoed
        in the body as a string because the server expects it there too.

        Args:
            device_id: Id of the device to update.
            new_name: New display name.
            type: Device type to store (pass the current one to keep it).
            capacity: Capacity in GB to store (pass the current one to keep it).
        """
        operation = f"edit device with ID {device_id}"
        payload = {
            "id": f"{device_id}",
            "system_name": new_name,
            "type": type,
            "hdd_capacity": str(capacity),
        }
        response = self._request(
            "PUT", f"/devices/{device_id}", operation=operation, json=payload
        )
        body = response.json() if response.content else {}
        # Some servers answer PUT with an empty body or a bare count.
        if isinstance(body, dict) and "id" in body:
            return Device.from_json(body)
        return Device(
            id=str(device_id), system_name=new_name, type=type, hdd_capacity=str(capacity)
        )

    def delete_device(self, device_id: str | int) -> None:
        """Delete the device with the given id."""
        self._request(
            "DELETE",
            f"/devices/{device_id}",
            operation=f"delete device with ID {device_id}",
        )

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _request(
        self, method: str, path: str, *, operation: str, json: dict[str, Any] | None = None
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.info("%s %s (%s)", method, url, operation)
        try:
            response = requests.request(
                method=method, url=url, json=json, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.error("Error during %s: %s", operation, exc)
            raise

        if not 200 <= response.status_code < 300:
            logger.error(
                "Error during %s: unexpected status %s", operation, response.status_code
            )
            raise DevicesAPIError(operation, response.status_code)
        return response
