"""
Tests for HTTP error mapping.

Ensures status codes map to the right ErrorKind and that messages come from
the response's ``reason`` field when the server sends one.
"""

import pytest

from instaparser._http.errors import (
    ErrorKind,
    InstaparserError,
    _safe_extract_error_message,
    raise_for_status,
)


class TestSafeExtractErrorMessage:
    """Tests for _safe_extract_error_message helper function."""

    def test_dict_with_reason(self):
        body = {"reason": "Invalid URL"}
        assert _safe_extract_error_message(body, default="default") == "Invalid URL"

    def test_dict_without_reason(self):
        body = {"status": "failed"}
        assert _safe_extract_error_message(body, default="default") == "default"

    def test_empty_reason_returns_default(self):
        body = {"reason": ""}
        assert _safe_extract_error_message(body, default="default") == "default"

    def test_non_string_reason_returns_default(self):
        body = {"reason": {"detail": "nested"}}
        assert _safe_extract_error_message(body, default="default") == "default"

    @pytest.mark.parametrize("body", [None, "unauthorized", 401, ["a"], True])
    def test_non_dict_body_returns_default(self, body):
        assert _safe_extract_error_message(body, default="default") == "default"


class TestRaiseForStatus:
    """Tests for raise_for_status."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success_does_not_raise(self, status):
        raise_for_status(status, {"reason": "ignored"})

    @pytest.mark.parametrize(
        "status, kind, message",
        [
            (400, ErrorKind.VALIDATION, "Invalid request"),
            (401, ErrorKind.AUTHENTICATION, "Invalid API key"),
            (403, ErrorKind.API, "Account suspended"),
            (409, ErrorKind.API, "Exceeded monthly API calls"),
            (429, ErrorKind.RATE_LIMIT, "Rate limit exceeded"),
            (500, ErrorKind.API, "API request failed with status 500"),
            (418, ErrorKind.API, "API request failed with status 418"),
        ],
    )
    def test_status_mapping(self, status, kind, message):
        with pytest.raises(InstaparserError) as exc_info:
            raise_for_status(status, None)

        error = exc_info.value
        assert error.kind is kind
        assert error.status_code == status
        assert error.message == message

    def test_reason_overrides_default_message(self):
        with pytest.raises(InstaparserError) as exc_info:
            raise_for_status(401, {"reason": "API key revoked"})

        assert exc_info.value.message == "API key revoked"
        assert exc_info.value.details["response"] == {"reason": "API key revoked"}

    def test_rate_limit_carries_retry_after(self):
        with pytest.raises(InstaparserError) as exc_info:
            raise_for_status(429, None, retry_after=30)

        assert exc_info.value.details["retry_after"] == 30

    def test_authentication_error_has_hint(self):
        with pytest.raises(InstaparserError) as exc_info:
            raise_for_status(401, None)

        assert "INSTAPARSER_API_KEY" in str(exc_info.value)
        assert exc_info.value.hint is not None


class TestInstaparserError:
    """Tests for the error type itself."""

    def test_defaults(self):
        error = InstaparserError("boom")

        assert error.kind is ErrorKind.API
        assert error.status_code is None
        assert error.original_error is None
        assert error.details == {}
        assert str(error) == "boom"

    def test_repr(self):
        error = InstaparserError("boom", kind=ErrorKind.RATE_LIMIT, status_code=429)

        assert repr(error) == "InstaparserError('boom', kind=rate_limit, status_code=429)"

    def test_validation(self):
        error = InstaparserError.validation("output must be 'html' or 'text'")

        assert error.kind is ErrorKind.VALIDATION
        assert error.status_code is None

    def test_from_exception(self):
        cause = OSError("connection refused")

        error = InstaparserError.from_exception(cause, base_url="https://x.test")

        assert error.kind is ErrorKind.TRANSPORT
        assert error.original_error is cause
        assert "https://x.test" in error.message
        assert "connection refused" in error.message

    def test_stream_failure(self):
        cause = OSError("reset")

        error = InstaparserError.stream_failure(cause)

        assert error.kind is ErrorKind.TRANSPORT
        assert error.message == "Stream error: reset"
