"""
GenderAPI.io client

Determines gender from personal names, email addresses and social media
usernames, one at a time or in bulk. Options include country filtering,
direct AI queries and forced genderization of nicknames or unconventional
strings.
"""
from typing import Optional, Sequence

import httpx

from genderapi import endpoints
from genderapi.config import Settings, get_settings
from genderapi.dispatcher import RequestDispatcher
from genderapi.exceptions import ConfigurationError
from genderapi.logging import get_logger
from genderapi.types import APICredentials, BulkRecord, OperationSpec, ResponseData


class GenderAPIClient:
    """
    Async client for the GenderAPI.io service

    Usage:
        async with GenderAPIClient(api_key="...") as client:
            result = await client.get_gender_by_name("Alice", country="US")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the client

        Args:
            api_key: API key sent as a Bearer token; falls back to GENDERAPI_API_KEY
            base_url: Service base URL; falls back to GENDERAPI_BASE_URL, then https://api.genderapi.io
            timeout: Default request timeout in seconds; unset uses the transport default
            http_client: Pre-configured httpx.AsyncClient to send requests with
            settings: Settings to read fallbacks from instead of the environment
        """
        self.settings = settings or get_settings()

        api_key = api_key or self.settings.get_api_key()
        if not api_key:
            raise ConfigurationError(
                "API key is required: pass api_key or set GENDERAPI_API_KEY",
                setting="api_key",
            )

        self._credentials = APICredentials(api_key=api_key)
        self._base_url = (base_url or self.settings.base_url).rstrip("/")

        if timeout is None:
            timeout = self.settings.request_timeout

        self._dispatcher = RequestDispatcher(
            credentials=self._credentials,
            base_url=self._base_url,
            http_client=http_client,
            timeout=timeout,
        )
        self.logger = get_logger(__name__, base_url=self._base_url)

    @property
    def api_key(self) -> str:
        return self._credentials.api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._base_url!r})"

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self._dispatcher.aclose()

    async def _call(self, operation: OperationSpec, timeout: Optional[float] = None, **params) -> ResponseData:
        """Validate, build and dispatch one operation"""
        operation.validate(**params)

        if operation.is_bulk and operation.exceeds_limit(**params):
            self.logger.warning(
                f"{operation.name}: {len(params['data'])} records exceeds the service limit of "
                f"{operation.max_items}; sending unchanged"
            )

        payload = operation.build_payload(**params)
        return await self._dispatcher.dispatch(operation.path, payload, timeout=timeout)

    async def get_gender_by_name(
        self,
        name: str,
        country: Optional[str] = None,
        ask_to_ai: bool = False,
        force_to_genderize: bool = False,
        timeout: Optional[float] = None,
    ) -> ResponseData:
        """
        Determine gender from a personal name

        Args:
            name: The name to analyze
            country: Optional two-letter country code (e.g. "US")
            ask_to_ai: Whether to force an AI lookup
            force_to_genderize: Whether to analyze nicknames or emojis
            timeout: Optional timeout for this call in seconds

        Returns:
            Parsed JSON response

        Raises:
            ValidationError: If name is missing or empty
        """
        return await self._call(
            endpoints.NAME,
            timeout=timeout,
            name=name,
            country=country,
            ask_to_ai=ask_to_ai,
            force_to_genderize=force_to_genderize,
        )

    async def get_gender_by_email(
        self,
        email: str,
        country: Optional[str] = None,
        ask_to_ai: bool = False,
        timeout: Optional[float] = None,
    ) -> ResponseData:
        """
        Determine gender from an email address

        Args:
            email: The email address to analyze
            country: Optional two-letter country code (e.g. "US")
            ask_to_ai: Whether to force an AI lookup
            timeout: Optional timeout for this call in seconds

        Returns:
            Parsed JSON response
        """
        return await self._call(
            endpoints.EMAIL,
            timeout=timeout,
            email=email,
            country=country,
            ask_to_ai=ask_to_ai,
        )

    async def get_gender_by_username(
        self,
        username: str,
        country: Optional[str] = None,
        ask_to_ai: bool = False,
        force_to_genderize: bool = False,
        timeout: Optional[float] = None,
    ) -> ResponseData:
        """
        Determine gender from a social media username

        Args:
            username: The username to analyze
            country: Optional two-letter country code (e.g. "US")
            ask_to_ai: Whether to force an AI lookup
            force_to_genderize: Whether to analyze nicknames or emojis
            timeout: Optional timeout for this call in seconds

        Returns:
            Parsed JSON response
        """
        return await self._call(
            endpoints.USERNAME,
            timeout=timeout,
            username=username,
            country=country,
            ask_to_ai=ask_to_ai,
            force_to_genderize=force_to_genderize,
        )

    async def get_gender_by_name_bulk(
        self, data: Sequence[BulkRecord], timeout: Optional[float] = None
    ) -> ResponseData:
        """
        Determine gender for up to 100 names in one request

        Each record holds "name" and optionally "country" and an "id" that the
        service echoes back so results can be matched to inputs.
        """
        return await self._call(endpoints.NAME_BULK, timeout=timeout, data=data)

    async def get_gender_by_email_bulk(
        self, data: Sequence[BulkRecord], timeout: Optional[float] = None
    ) -> ResponseData:
        """
        Determine gender for up to 50 email addresses in one request

        Records hold "email" and optionally "country" and "id".
        """
        return await self._call(endpoints.EMAIL_BULK, timeout=timeout, data=data)

    async def get_gender_by_username_bulk(
        self, data: Sequence[BulkRecord], timeout: Optional[float] = None
    ) -> ResponseData:
        """Determine gender for up to 50 usernames in one request ("username", "country", "id")"""
        return await self._call(endpoints.USERNAME_BULK, timeout=timeout, data=data)
