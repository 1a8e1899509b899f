"""
Instaparser SDK - Python client for the Instaparser API.

Parses articles and PDFs into clean HTML or text and generates article
summaries, optionally streamed line by line.

Basic Usage:
    >>> from instaparser import InstaparserClient
    >>> client = InstaparserClient(api_key="your-api-key")
    >>> article = client.article("https://example.com/article")
    >>> print(article.title)

Streaming Summaries:
    >>> summary = client.summary(
    ...     "https://example.com/article",
    ...     stream_callback=lambda line: print(line),
    ... )
    >>> print(summary.overview)

Singleton Pattern:
    >>> from instaparser import get_client
    >>> client = get_client()  # Reads from INSTAPARSER_* env vars
"""

from ._http.errors import ErrorKind, InstaparserError
from .client import AsyncInstaparserClient, InstaparserClient, get_client, reset_client
from .config import InstaparserConfig
from .streaming import SummaryStreamAccumulator
from .types import Article, DocumentKind, OutputFormat, Summary
from .version import __version__, __version_info__

__all__ = [
    # Clients
    "InstaparserClient",
    "AsyncInstaparserClient",
    "get_client",
    "reset_client",
    # Configuration
    "InstaparserConfig",
    # Results
    "Article",
    "DocumentKind",
    "OutputFormat",
    "Summary",
    # Streaming
    "SummaryStreamAccumulator",
    # Errors
    "ErrorKind",
    "InstaparserError",
    # Version
    "__version__",
    "__version_info__",
]
