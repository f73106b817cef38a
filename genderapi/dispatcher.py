"""
Request dispatcher: the single chokepoint for every outbound call

Builds the authenticated JSON POST, sends it through httpx and normalizes the
response into parsed JSON or one of the client exceptions.
"""
import json
import time
from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx

from genderapi.exceptions import InvalidResponseError, ServerError, TransportError, ValidationError
from genderapi.logging import get_logger
from genderapi.types import APICredentials, Endpoint, Payload, RequestHeaders, ResponseData

# Statuses treated as hard server failures when the body carries no error of its own
SERVER_ERROR_STATUSES = frozenset({408, 500, 502, 503, 504})

logger = get_logger(__name__)


def clean_payload(payload: Mapping) -> Payload:
    """
    Return a new payload without None values

    Mappings inside list values (bulk records) are cleaned the same way into new
    dicts; other elements are forwarded untouched. The input is never mutated.
    """
    cleaned = {}
    for key, value in payload.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = [
                {k: v for k, v in item.items() if v is not None} if isinstance(item, Mapping) else item
                for item in value
            ]
        cleaned[key] = value
    return cleaned


def _serialize(payload: Payload) -> str:
    """Encode a cleaned payload, naming the first field JSON cannot encode"""
    try:
        return json.dumps(payload)
    except (TypeError, ValueError) as e:
        field = next((key for key, value in payload.items() if not _encodable(value)), None)
        raise ValidationError(f"Request payload is not JSON serializable: {e}", field=field) from e


def _encodable(value: Any) -> bool:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return False
    return True


def _error_indication(data: Any) -> bool:
    """True when a parsed body reports a failure in the service's own format"""
    if not isinstance(data, dict):
        return False
    return data.get("status") is False or "errno" in data or "errmsg" in data


class RequestDispatcher:
    """Sends authenticated POST requests and classifies the responses"""

    def __init__(
        self,
        credentials: APICredentials,
        base_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        # An injected client belongs to the caller and is left open on aclose()
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    def _get_headers(self) -> RequestHeaders:
        """Build a fresh header set for one request"""
        return {
            "Authorization": self.credentials.authorization_header(),
            "Content-Type": "application/json",
        }

    def build_url(self, path: Union[str, Endpoint]) -> str:
        if isinstance(path, Endpoint):
            path = path.value
        return f"{self.base_url}/{path.lstrip('/')}"

    async def dispatch(
        self,
        path: Union[str, Endpoint],
        payload: Mapping,
        timeout: Optional[float] = None,
    ) -> ResponseData:
        """
        POST a payload to an endpoint and return the parsed JSON response

        Args:
            path: Endpoint path, e.g. "/api/email"
            payload: Request fields; None values are dropped
            timeout: Seconds for this call, overriding the dispatcher timeout

        Returns:
            Parsed JSON body exactly as the service sent it: normally a dict or
            list, but a bare JSON scalar such as null comes back as None or the scalar

        Raises:
            ValidationError: The payload holds a value JSON cannot encode
            TransportError: No response was received
            ServerError: The service reported a failure
            InvalidResponseError: The body is not valid JSON
        """
        url = self.build_url(path)
        body = _serialize(clean_payload(payload))

        request_kwargs = {}
        effective_timeout = timeout if timeout is not None else self.timeout
        if effective_timeout is not None:
            request_kwargs["timeout"] = effective_timeout

        start_time = time.monotonic()
        try:
            response = await self.client.post(
                url,
                content=body,
                headers=self._get_headers(),
                **request_kwargs,
            )
        except httpx.RequestError as e:
            raise TransportError(str(e) or e.__class__.__name__, endpoint=url) from e

        logger.debug(
            f"POST {url} -> HTTP {response.status_code} "
            f"in {int((time.monotonic() - start_time) * 1000)}ms"
        )

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> ResponseData:
        """Parse the body first, then classify by the body's own error fields and the status"""
        status_code = response.status_code
        text = response.text

        try:
            data = json.loads(text)
        except ValueError as e:
            raise InvalidResponseError(status_code, text) from e

        if status_code == 200:
            return data

        if _error_indication(data):
            raise ServerError(
                status_code,
                response_body=text,
                response_data=data,
                errno=data.get("errno"),
                errmsg=data.get("errmsg") or data.get("message"),
            )

        if status_code in SERVER_ERROR_STATUSES:
            raise ServerError(status_code, response_body=text, response_data=data)

        return data
