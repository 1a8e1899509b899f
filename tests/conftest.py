"""Pytest configuration and fixtures for Instaparser SDK tests."""

import json

import httpx
import pytest

from instaparser import AsyncInstaparserClient, InstaparserClient
from instaparser.config import InstaparserConfig


TEST_API_KEY = "ip_test_secret_key"
TEST_BASE_URL = "https://test.instaparser.com"


@pytest.fixture
def test_config():
    """Create a test configuration."""
    return InstaparserConfig(api_key=TEST_API_KEY, base_url=TEST_BASE_URL)


class RecordingHandler:
    """
    MockTransport handler that records requests and replays a canned response.

    ``chunks`` makes the response body a stream of those chunks; ``error``
    is raised after the chunks have been sent.
    """

    def __init__(
        self,
        status_code=200,
        json_body=None,
        text=None,
        chunks=None,
        error=None,
        headers=None,
        asynchronous=False,
    ):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.chunks = chunks
        self.error = error
        self.headers = headers or {}
        self.asynchronous = asynchronous
        self.requests = []

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)

    def _sync_stream(self):
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error

    async def _async_stream(self):
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        # read the body so multipart uploads can be inspected
        request.read()
        self.requests.append(request)

        if self.chunks is not None:
            stream = self._async_stream() if self.asynchronous else self._sync_stream()
            return httpx.Response(self.status_code, headers=self.headers, content=stream)
        if self.json_body is not None:
            return httpx.Response(self.status_code, headers=self.headers, json=self.json_body)
        return httpx.Response(self.status_code, headers=self.headers, text=self.text or "")


@pytest.fixture
def make_client():
    """Build a sync client whose requests are answered by a RecordingHandler."""
    clients = []

    def _make(**handler_kwargs):
        handler = RecordingHandler(**handler_kwargs)
        client = InstaparserClient(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client, handler

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def make_async_client():
    """Build an async client whose requests are answered by a RecordingHandler."""

    def _make(**handler_kwargs):
        handler = RecordingHandler(asynchronous=True, **handler_kwargs)
        client = AsyncInstaparserClient(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(handler),
        )
        return client, handler

    return _make


@pytest.fixture
def sample_article_response():
    """Create a sample /api/1/article response."""
    return {
        "url": "https://example.com/article",
        "title": "An Example Article",
        "site_name": "Example",
        "author": "Jane Writer",
        "date": 1700000000,
        "description": "What the article is about",
        "thumbnail": "https://example.com/thumb.jpg",
        "words": 1234,
        "is_rtl": False,
        "images": ["https://example.com/a.png"],
        "videos": ["https://example.com/v.mp4"],
        "html": "<p>Hello</p>",
    }


@pytest.fixture
def sample_stream_lines():
    """Create sample lines of a streamed summary response."""
    return [
        'key_sentences: ["First key sentence.", "Second key sentence."]',
        "delta: The article ",
        "delta: explains streaming.",
    ]
