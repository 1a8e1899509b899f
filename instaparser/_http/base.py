"""
Shared HTTP behaviour for the sync and async Instaparser transports.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import InstaparserConfig
from .errors import InstaparserError, raise_for_status

logger = logging.getLogger(__name__)


class HTTPBase:
    """
    Builds URLs and headers and turns httpx responses into JSON or errors.
    """

    def __init__(self, config: InstaparserConfig):
        self.config = config

    @property
    def default_headers(self) -> Dict[str, str]:
        return self.config.get_headers()

    def _prepare_url(self, endpoint: str) -> str:
        """Join the configured base URL and an API path."""
        return f"{self.config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def _session_kwargs(self) -> Dict[str, Any]:
        return {
            "headers": self.default_headers,
            "timeout": httpx.Timeout(self.config.timeout),
        }

    @staticmethod
    def _response_body(response: httpx.Response) -> Any:
        """Decode a response body as JSON, falling back to text."""
        try:
            return response.json()
        except ValueError:
            return response.text or None

    @staticmethod
    def _retry_after(response: httpx.Response) -> Optional[int]:
        value = response.headers.get("Retry-After")
        if value and value.isdigit():
            return int(value)
        return None

    def _handle_http_error(self, response: httpx.Response) -> None:
        """
        Raise the InstaparserError matching a non-success response.

        The body must already be read.
        """
        body = self._response_body(response)
        logger.warning(
            "Instaparser request %s %s failed with status %s",
            response.request.method,
            response.request.url.path,
            response.status_code,
        )
        raise_for_status(
            response.status_code,
            body,
            retry_after=self._retry_after(response),
        )

    def _process_response(self, response: httpx.Response) -> Dict[str, Any]:
        """
        Return the JSON object body of a successful response.

        Raises:
            InstaparserError: On error status codes or a non-object body.
        """
        logger.debug(
            "%s %s -> %s",
            response.request.method,
            response.request.url.path,
            response.status_code,
        )
        if not response.is_success:
            self._handle_http_error(response)

        body = self._response_body(response)
        if not isinstance(body, dict):
            raise InstaparserError(
                "Invalid response format",
                status_code=response.status_code,
                details={"response": body},
            )
        return body
