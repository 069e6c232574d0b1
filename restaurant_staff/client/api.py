"""
HTTP client for the employee API.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"

# Keys a write response may wrap its record in
ENVELOPE_KEYS = ("Data saved", "Data updated", "Data deleted successfully", "data")


class NetworkError(Exception):
    """The server could not be reached."""


class ApiError(Exception):
    """The server answered with a non-success status."""

    def __init__(self, status_code: int, message: str, kind: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.kind = kind
        self.field = field

    @property
    def is_duplicate_email(self) -> bool:
        """
        True when the server rejected a record because its email is taken.

        Servers that report an error kind are trusted; older ones only say so
        in the message text.
        """
        if self.kind:
            return self.kind == "duplicate" and self.field == "email"
        text = self.message.lower()
        return "duplicate" in text and "email" in text


def unwrap(payload: Any) -> Any:
    """Return the record inside a write envelope, or the payload itself."""
    if isinstance(payload, dict):
        for key in ENVELOPE_KEYS:
            if key in payload and payload[key] is not None:
                return payload[key]
    return payload


class EmployeeApiClient:
    """
    Async client for the employee endpoints and the health check.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, resource: str = "employees",
                 transport: Optional[httpx.AsyncBaseTransport] = None, timeout: Optional[float] = None):
        """
        Args:
            base_url: Server root, e.g. http://localhost:3000
            resource: Collection path; "persons" talks to the legacy mount
            transport: Optional httpx transport (used by tests)
            timeout: Request timeout in seconds; httpx's default when None
        """
        self.base_url = base_url.rstrip("/")
        self.resource = resource.strip("/")
        kwargs = {"base_url": self.base_url, "headers": {"Content-Type": "application/json"}}
        if transport is not None:
            kwargs["transport"] = transport
        if timeout is not None:
            kwargs["timeout"] = timeout
        self._client = httpx.AsyncClient(**kwargs)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self):
        await self._client.aclose()

    async def request(self, method: str, path: str, json: Any = None, params: Optional[Dict[str, str]] = None) -> Any:
        """
        Send a request and decode the JSON answer.

        Raises:
            NetworkError: If the server cannot be reached
            ApiError: If the server answers with a 4xx/5xx status
        """
        try:
            response = await self._client.request(method, path, json=json, params=params)
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {str(e)}")
            raise NetworkError(
                "Unable to connect to the server. Please check if the backend is running."
            ) from e

        if response.is_error:
            raise self._api_error(response)

        return response.json()

    @staticmethod
    def _api_error(response: httpx.Response) -> ApiError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        message = (
            body.get("message")
            or body.get("error")
            or body.get("detail")
            or body.get("Internal Server Error")
            or f"HTTP {response.status_code}: {response.reason_phrase}"
        )
        return ApiError(response.status_code, str(message), kind=body.get("kind"), field=body.get("field"))

    def _path(self, *parts: str) -> str:
        return "/" + "/".join([self.resource, *parts])

    async def health(self) -> Dict[str, Any]:
        return await self.request("GET", "/health")

    async def list_employees(self, **filters: Optional[str]) -> List[Dict[str, Any]]:
        """
        Fetch employees, optionally filtered by status, position and shift.
        """
        params = {k: v for k, v in filters.items() if v}
        data = await self.request("GET", self._path(), params=params or None)
        return data if isinstance(data, list) else [data]

    async def list_by_position(self, position: str) -> List[Dict[str, Any]]:
        return await self.request("GET", self._path(position))

    async def stats(self) -> Dict[str, Any]:
        return await self.request("GET", self._path("stats", "summary"))

    async def create_employee(self, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        return unwrap(await self.request("POST", self._path(), json=employee_data))

    async def update_employee(self, employee_id: str, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        return unwrap(await self.request("PUT", self._path(employee_id), json=employee_data))

    async def update_status(self, employee_id: str, status: str) -> Dict[str, Any]:
        return unwrap(await self.request("PATCH", self._path(employee_id, "status"), json={"status": status}))

    async def delete_employee(self, employee_id: str) -> Dict[str, Any]:
        return unwrap(await self.request("DELETE", self._path(employee_id)))
