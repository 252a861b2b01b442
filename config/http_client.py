"""
HTTP clients for the WaPulse gateway and the Medici booking backend.
"""

import json
from typing import Dict, Any, Optional
import httpx
import structlog
from .base import WapulseConfig, BookingConfig, APIError

logger = structlog.get_logger()


def extract_error_message(response: httpx.Response, error_text: str) -> str:
    """
    Build the error message for a non-2xx response.

    The message always starts with the HTTP status, followed by the most
    specific description found in the body.
    """
    description = response.reason_phrase or "Request failed"

    if error_text:
        try:
            error_data = json.loads(error_text)
        except ValueError:
            description = error_text
        else:
            if isinstance(error_data, dict) and error_data.get("error"):
                description = str(error_data["error"])
                if error_data.get("details"):
                    description += f" - {error_data['details']}"
            elif isinstance(error_data, dict) and error_data.get("message"):
                description = str(error_data["message"])
            else:
                description = error_text

    return f"HTTP {response.status_code}: {description}"


def parse_response(response: httpx.Response, endpoint: str) -> Any:
    """
    Parse an upstream response.

    Raises:
        APIError: If the status code is not 2xx
    """
    response_text = response.text

    if not response.is_success:
        raise APIError(
            extract_error_message(response, response_text),
            status_code=response.status_code,
            details={"endpoint": endpoint, "body": response_text}
        )

    try:
        return json.loads(response_text)
    except ValueError:
        return {"success": True, "data": response_text}


class JSONPostClient:
    """Single-use async client that POSTs JSON to one base URL."""

    def __init__(self, base_url: str, timeout: int, headers: Optional[Dict[str, str]] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                **(headers or {})
            },
            transport=transport
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()

    async def _send(self, endpoint: str, body: Dict[str, Any]) -> Any:
        try:
            response = await self._client.post(endpoint, json=body)
        except httpx.RequestError as e:
            logger.error("Request error", endpoint=endpoint, error=str(e), error_type=type(e).__name__)
            raise APIError(f"Request failed for endpoint {endpoint}: {e}", details={"endpoint": endpoint})

        logger.info(
            "API response received",
            endpoint=endpoint,
            status_code=response.status_code
        )
        return parse_response(response, endpoint)


class WapulseHTTPClient(JSONPostClient):
    """HTTP client for the WaPulse API. Credentials travel in the JSON body."""

    def __init__(self, config: WapulseConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        super().__init__(config.base_url, config.timeout, transport=transport)

    async def post(self, endpoint: str, data: Dict[str, Any], token: str,
                   instance_id: Optional[str] = None) -> Any:
        """
        Make a POST request to the specified endpoint.

        Args:
            endpoint: API endpoint path
            data: Request payload, merged after the credentials
            token: WaPulse token
            instance_id: WaPulse instance ID, omitted from the body when None

        Returns:
            Parsed JSON response, or {"success": True, "data": <text>} for non-JSON bodies

        Raises:
            APIError: If the API call fails
        """
        body: Dict[str, Any] = {"token": token}
        if instance_id:
            body["instanceID"] = instance_id
        body.update(data)

        logger.info(
            "Making API request",
            endpoint=endpoint,
            has_instance=bool(instance_id)
        )
        return await self._send(endpoint, body)


class BookingHTTPClient(JSONPostClient):
    """HTTP client for the Medici booking API. Uses bearer authentication."""

    def __init__(self, config: BookingConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        token = config.resolve_token()
        super().__init__(
            config.base_url,
            config.timeout,
            headers={"Authorization": f"Bearer {token}"},
            transport=transport
        )

    async def post(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """
        Make an authenticated POST request to the booking API.

        Raises:
            APIError: If the API call fails
        """
        logger.info("Making booking API request", endpoint=endpoint)
        return await self._send(endpoint, data)
