"""
HTTP Client

Sync and async HTTP clients for Instaparser API communication.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import InstaparserConfig
from ..streaming import SummaryStreamAccumulator
from ..types.responses import Summary
from .base import HTTPBase
from .errors import InstaparserError

logger = logging.getLogger(__name__)


class HTTPClient(HTTPBase):
    """
    Sync HTTP client for the Instaparser API.

    Wraps httpx.Client with Instaparser authentication and error handling.
    """

    def __init__(
        self,
        config: InstaparserConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            config: InstaparserConfig instance
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        super().__init__(config)
        self._transport = transport
        self._session: Optional[httpx.Client] = None

    def _get_session(self) -> httpx.Client:
        """Get or create httpx session."""
        if self._session is None:
            self._session = httpx.Client(
                transport=self._transport,
                **self._session_kwargs(),
            )
        return self._session

    def request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: API path (e.g., "/api/1/article")
            **kwargs: Passed to httpx (json, params, data, files)

        Returns:
            Response JSON

        Raises:
            InstaparserError: On error responses or transport failures
        """
        session = self._get_session()
        try:
            response = session.request(method, self._prepare_url(path), **kwargs)
        except httpx.HTTPError as e:
            raise InstaparserError.from_exception(e, self.config.base_url) from e
        return self._process_response(response)

    def stream_summary(
        self,
        path: str,
        json: Dict[str, Any],
        accumulator: SummaryStreamAccumulator,
    ) -> Summary:
        """
        POST ``json`` and feed the streamed response body into ``accumulator``.

        Raises:
            InstaparserError: On error responses, transport failures, or
                malformed key sentences mid-stream
        """
        session = self._get_session()
        try:
            with session.stream("POST", self._prepare_url(path), json=json) as response:
                if not response.is_success:
                    response.read()
                    self._handle_http_error(response)

                logger.debug("Streaming summary from %s", path)
                try:
                    for chunk in response.iter_bytes():
                        accumulator.on_chunk(chunk)
                except httpx.HTTPError as e:
                    accumulator.on_error(e)
                return accumulator.on_end()
        except httpx.HTTPError as e:
            raise InstaparserError.from_exception(e, self.config.base_url) from e

    def close(self):
        """Close HTTP session."""
        if self._session:
            self._session.close()
            self._session = None


class AsyncHTTPClient(HTTPBase):
    """
    Async HTTP client for the Instaparser API.

    Wraps httpx.AsyncClient with Instaparser authentication and error handling.
    """

    def __init__(
        self,
        config: InstaparserConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(config)
        self._transport = transport
        self._session: Optional[httpx.AsyncClient] = None

    def _get_session(self) -> httpx.AsyncClient:
        """Get or create httpx session."""
        if self._session is None:
            self._session = httpx.AsyncClient(
                transport=self._transport,
                **self._session_kwargs(),
            )
        return self._session

    async def request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Send a request and return the decoded JSON body."""
        session = self._get_session()
        try:
            response = await session.request(method, self._prepare_url(path), **kwargs)
        except httpx.HTTPError as e:
            raise InstaparserError.from_exception(e, self.config.base_url) from e
        return self._process_response(response)

    async def stream_summary(
        self,
        path: str,
        json: Dict[str, Any],
        accumulator: SummaryStreamAccumulator,
    ) -> Summary:
        """POST ``json`` and feed the streamed response body into ``accumulator``."""
        session = self._get_session()
        try:
            async with session.stream("POST", self._prepare_url(path), json=json) as response:
                if not response.is_success:
                    await response.aread()
                    self._handle_http_error(response)

                logger.debug("Streaming summary from %s", path)
                try:
                    async for chunk in response.aiter_bytes():
                        accumulator.on_chunk(chunk)
                except httpx.HTTPError as e:
                    accumulator.on_error(e)
                return accumulator.on_end()
        except httpx.HTTPError as e:
            raise InstaparserError.from_exception(e, self.config.base_url) from e

    async def close(self):
        """Close HTTP session."""
        if self._session:
            await self._session.aclose()
            self._session = None
