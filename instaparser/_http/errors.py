"""
Instaparser SDK Error Types

One exception type tagged with an ErrorKind, plus helpers that map HTTP
responses and transport failures onto it.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Category of an Instaparser failure."""

    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    API = "api"
    TRANSPORT = "transport"


# status code -> (kind, default message)
_STATUS_ERRORS = {
    400: (ErrorKind.VALIDATION, "Invalid request"),
    401: (ErrorKind.AUTHENTICATION, "Invalid API key"),
    403: (ErrorKind.API, "Account suspended"),
    409: (ErrorKind.API, "Exceeded monthly API calls"),
    429: (ErrorKind.RATE_LIMIT, "Rate limit exceeded"),
}

_HINTS = {
    ErrorKind.AUTHENTICATION: """
1. Check your API key is set:
   export INSTAPARSER_API_KEY=your_api_key

2. Verify the key in your Instaparser account settings

3. If using a custom base URL, verify it's correct:
   export INSTAPARSER_BASE_URL=https://www.instaparser.com
""".strip(),
    ErrorKind.RATE_LIMIT: """
1. Wait before retrying (check Retry-After header)
2. Reduce request frequency
3. Implement exponential backoff
""".strip(),
}


def _safe_extract_error_message(
    response_body: Any,
    default: str,
    *,
    key: str = "reason",
) -> str:
    """
    Safely extract error message from response body with type validation.

    Handles non-dict JSON responses (lists, strings, numbers, null, bool) and
    empty messages by returning the default message.
    """
    if not isinstance(response_body, dict):
        return default

    message = response_body.get(key)
    if isinstance(message, str) and message:
        return message
    return default


class InstaparserError(Exception):
    """
    Error raised by every Instaparser SDK operation.

    The ``kind`` attribute tells callers what went wrong; ``status_code`` and
    ``original_error`` are set when an HTTP status or an underlying exception
    is available.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind = ErrorKind.API,
        status_code: Optional[int] = None,
        hint: Optional[str] = None,
        original_error: Optional[BaseException] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize InstaparserError.

        Args:
            message: Main error message.
            kind: Error category.
            status_code: HTTP status code, if any.
            hint: Optional actionable guidance.
            original_error: Original exception that caused this error.
            details: Additional error details.
        """
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.hint = hint
        self.original_error = original_error
        self.details = details or {}

        full_message = message
        if hint:
            full_message = f"{message}\n\nTo fix:\n{hint}"

        super().__init__(full_message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.message!r}, "
            f"kind={self.kind.value}, status_code={self.status_code})"
        )

    @classmethod
    def validation(cls, message: str) -> "InstaparserError":
        """Create a client-side validation error (no request was sent)."""
        return cls(message, kind=ErrorKind.VALIDATION)

    @classmethod
    def from_response(
        cls,
        status_code: int,
        response_body: Any = None,
        retry_after: Optional[int] = None,
    ) -> "InstaparserError":
        """
        Create an error from a non-success HTTP response.

        Args:
            status_code: HTTP status code.
            response_body: Decoded JSON body, raw text, or None.
            retry_after: Seconds to wait before retrying (rate limits only).

        Returns:
            InstaparserError tagged with the kind for this status code.
        """
        kind, default = _STATUS_ERRORS.get(
            status_code,
            (ErrorKind.API, f"API request failed with status {status_code}"),
        )
        details: dict[str, Any] = {"response": response_body}
        if kind is ErrorKind.RATE_LIMIT:
            details["retry_after"] = retry_after

        return cls(
            _safe_extract_error_message(response_body, default),
            kind=kind,
            status_code=status_code,
            hint=_HINTS.get(kind),
            details=details,
        )

    @classmethod
    def from_exception(
        cls,
        original: BaseException,
        base_url: Optional[str] = None,
    ) -> "InstaparserError":
        """
        Create a transport error from an underlying connection exception.

        Args:
            original: Original transport exception.
            base_url: The base URL that failed.

        Returns:
            InstaparserError of kind TRANSPORT.
        """
        url_info = f" ({base_url})" if base_url else ""
        return cls(
            f"Failed to reach Instaparser{url_info}: {original}",
            kind=ErrorKind.TRANSPORT,
            original_error=original,
            details={"base_url": base_url},
        )

    @classmethod
    def stream_failure(cls, original: BaseException) -> "InstaparserError":
        """Create a transport error for a stream that broke before completing."""
        return cls(
            f"Stream error: {original}",
            kind=ErrorKind.TRANSPORT,
            original_error=original,
        )


def raise_for_status(
    status_code: int,
    response_body: Any = None,
    *,
    retry_after: Optional[int] = None,
) -> None:
    """
    Raise an InstaparserError for any non-2xx status code.

    Args:
        status_code: HTTP status code.
        response_body: Response body (may be non-dict for some servers/proxies).
        retry_after: Value of the Retry-After header in seconds, if sent.

    Raises:
        InstaparserError: Tagged with the kind matching the status code.
    """
    if 200 <= status_code < 300:
        return

    raise InstaparserError.from_response(status_code, response_body, retry_after)
