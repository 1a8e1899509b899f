"""
Main Instaparser clients.

Provides sync and async clients for parsing articles and PDFs and
generating article summaries, optionally streamed line by line.
"""

import io
import logging
from typing import Any, Dict, Optional, Tuple, Union

import httpx

from ._http import AsyncHTTPClient, HTTPClient, InstaparserError
from .config import DEFAULT_BASE_URL, InstaparserConfig
from .streaming import LineCallback, SummaryStreamAccumulator
from .types import (
    Article,
    ArticleRequest,
    OutputFormat,
    PDFRequest,
    Summary,
    SummaryRequest,
    article_from_response,
    parse_output_format,
    pdf_from_response,
    summary_from_response,
    use_cache_flag,
)

logger = logging.getLogger(__name__)

ARTICLE_ENDPOINT = "/api/1/article"
SUMMARY_ENDPOINT = "/api/1/summary"
PDF_ENDPOINT = "/api/1/pdf"

PDFFile = Union[bytes, bytearray, io.IOBase]

# Global singleton instance
_global_client: Optional["InstaparserClient"] = None


def _build_config(
    api_key: Optional[str],
    base_url: Optional[str],
    timeout: Optional[float],
    debug: Optional[bool],
    config: Optional[InstaparserConfig],
) -> InstaparserConfig:
    if config is None:
        config = InstaparserConfig(
            api_key=api_key or "",  # Will be validated by InstaparserConfig
            base_url=base_url or DEFAULT_BASE_URL,
            timeout=timeout if timeout is not None else 30.0,
            debug=bool(debug),
        )
    if config.debug:
        logging.getLogger("instaparser").setLevel(logging.DEBUG)
    return config


def _pdf_upload(file: Any) -> Tuple[str, Any, str]:
    """Validate a PDF upload and return its multipart file tuple."""
    if isinstance(file, str):
        raise InstaparserError.validation(
            "File path strings are not supported. Please provide bytes or a binary file object."
        )
    if isinstance(file, (bytes, bytearray)):
        return ("document.pdf", bytes(file), "application/pdf")
    if hasattr(file, "read"):
        return ("document.pdf", file, "application/pdf")
    raise InstaparserError.validation("File must be bytes or a binary file object")


def _article_payload(
    url: str,
    content: Optional[str],
    output: Union[str, OutputFormat],
    use_cache: bool,
) -> Dict[str, Any]:
    return ArticleRequest(
        url=url,
        output=parse_output_format(output),
        use_cache=use_cache_flag(use_cache),
        content=content,
    ).to_payload()


def _summary_payload(
    url: str,
    content: Optional[str],
    use_cache: bool,
    stream: bool,
) -> Dict[str, Any]:
    return SummaryRequest(
        url=url,
        stream=stream,
        use_cache=use_cache_flag(use_cache),
        content=content,
    ).to_payload()


def _pdf_fields(
    url: Optional[str],
    output: Union[str, OutputFormat],
    use_cache: bool,
) -> Dict[str, Any]:
    return PDFRequest(
        output=parse_output_format(output),
        use_cache=use_cache_flag(use_cache),
        url=url or None,
    ).to_payload()


class InstaparserClient:
    """
    Client for the Instaparser API.

    Example:
        >>> from instaparser import InstaparserClient
        >>> with InstaparserClient(api_key="your-api-key") as client:
        ...     article = client.article("https://example.com/article")
        ...     print(article.title)
    """

    BASE_URL = DEFAULT_BASE_URL

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: Optional[bool] = None,
        *,
        config: Optional[InstaparserConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the Instaparser client.

        Args:
            api_key: Your Instaparser API key
            base_url: API base URL (defaults to production)
            timeout: HTTP timeout in seconds
            debug: Enable debug logging
            config: Pre-built InstaparserConfig (overrides the other arguments)
            transport: Optional httpx transport

        Raises:
            ValueError: If configuration is invalid
        """
        self.config = _build_config(api_key, base_url, timeout, debug, config)
        self._http = HTTPClient(self.config, transport=transport)

    def article(
        self,
        url: str,
        *,
        content: Optional[str] = None,
        output: Union[str, OutputFormat] = OutputFormat.HTML,
        use_cache: bool = True,
    ) -> Article:
        """
        Parse an article from a URL or HTML content.

        Args:
            url: URL of the article to parse
            content: Optional raw HTML to parse instead of fetching the URL
            output: 'html' (default) or 'text'
            use_cache: Whether to use the server-side cache

        Returns:
            Article with the parsed content
        """
        payload = _article_payload(url, content, output, use_cache)
        logger.debug("Parsing article %s", url)
        data = self._http.request("POST", ARTICLE_ENDPOINT, json=payload)
        return article_from_response(data)

    def summary(
        self,
        url: str,
        *,
        content: Optional[str] = None,
        use_cache: bool = True,
        stream_callback: Optional[LineCallback] = None,
    ) -> Summary:
        """
        Generate a summary of an article.

        Args:
            url: URL of the article to summarize
            content: Optional HTML to summarize instead of fetching the URL
            use_cache: Whether to use the server-side cache
            stream_callback: If given, the summary is streamed and the callback
                receives each line of the response as it arrives

        Returns:
            Summary with key_sentences and overview
        """
        streaming = stream_callback is not None
        payload = _summary_payload(url, content, use_cache, streaming)
        logger.debug("Summarizing %s (stream=%s)", url, streaming)

        if streaming:
            accumulator = SummaryStreamAccumulator(stream_callback)
            return self._http.stream_summary(SUMMARY_ENDPOINT, payload, accumulator)

        data = self._http.request("POST", SUMMARY_ENDPOINT, json=payload)
        return summary_from_response(data)

    def pdf(
        self,
        url: Optional[str] = None,
        *,
        file: Optional[PDFFile] = None,
        output: Union[str, OutputFormat] = OutputFormat.HTML,
        use_cache: bool = True,
    ) -> Article:
        """
        Parse a PDF from a URL or an uploaded file.

        Args:
            url: URL of the PDF (fetched by the server when no file is given)
            file: PDF content as bytes or a binary file object
            output: 'html' (default) or 'text'
            use_cache: Whether to use the server-side cache

        Returns:
            Article of kind PDF
        """
        fields = _pdf_fields(url, output, use_cache)

        if file is not None:
            upload = _pdf_upload(file)
            logger.debug("Uploading PDF for parsing")
            data = self._http.request(
                "POST", PDF_ENDPOINT, data=fields, files={"file": upload}
            )
        elif url:
            logger.debug("Parsing PDF %s", url)
            data = self._http.request("GET", PDF_ENDPOINT, params=fields)
        else:
            raise InstaparserError.validation("Either 'url' or 'file' must be provided")

        return pdf_from_response(data)

    def close(self) -> None:
        """Close HTTP client and cleanup resources."""
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class AsyncInstaparserClient:
    """
    Async client for the Instaparser API.

    Example:
        >>> async with AsyncInstaparserClient(api_key="your-api-key") as client:
        ...     summary = await client.summary("https://example.com/article")
    """

    BASE_URL = DEFAULT_BASE_URL

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: Optional[bool] = None,
        *,
        config: Optional[InstaparserConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = _build_config(api_key, base_url, timeout, debug, config)
        self._http = AsyncHTTPClient(self.config, transport=transport)

    async def article(
        self,
        url: str,
        *,
        content: Optional[str] = None,
        output: Union[str, OutputFormat] = OutputFormat.HTML,
        use_cache: bool = True,
    ) -> Article:
        """Parse an article from a URL or HTML content."""
        payload = _article_payload(url, content, output, use_cache)
        logger.debug("Parsing article %s", url)
        data = await self._http.request("POST", ARTICLE_ENDPOINT, json=payload)
        return article_from_response(data)

    async def summary(
        self,
        url: str,
        *,
        content: Optional[str] = None,
        use_cache: bool = True,
        stream_callback: Optional[LineCallback] = None,
    ) -> Summary:
        """Generate a summary of an article, streamed when a callback is given."""
        streaming = stream_callback is not None
        payload = _summary_payload(url, content, use_cache, streaming)
        logger.debug("Summarizing %s (stream=%s)", url, streaming)

        if streaming:
            accumulator = SummaryStreamAccumulator(stream_callback)
            return await self._http.stream_summary(SUMMARY_ENDPOINT, payload, accumulator)

        data = await self._http.request("POST", SUMMARY_ENDPOINT, json=payload)
        return summary_from_response(data)

    async def pdf(
        self,
        url: Optional[str] = None,
        *,
        file: Optional[PDFFile] = None,
        output: Union[str, OutputFormat] = OutputFormat.HTML,
        use_cache: bool = True,
    ) -> Article:
        """Parse a PDF from a URL or an uploaded file."""
        fields = _pdf_fields(url, output, use_cache)

        if file is not None:
            upload = _pdf_upload(file)
            logger.debug("Uploading PDF for parsing")
            data = await self._http.request(
                "POST", PDF_ENDPOINT, data=fields, files={"file": upload}
            )
        elif url:
            logger.debug("Parsing PDF %s", url)
            data = await self._http.request("GET", PDF_ENDPOINT, params=fields)
        else:
            raise InstaparserError.validation("Either 'url' or 'file' must be provided")

        return pdf_from_response(data)

    async def close(self) -> None:
        """Close async HTTP client and cleanup resources."""
        await self._http.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def get_client(**overrides) -> InstaparserClient:
    """
    Get or create a singleton InstaparserClient from environment variables.

    Configuration is read from INSTAPARSER_* environment variables; see
    InstaparserConfig.from_env. Keyword overrides apply only when the
    singleton is first created.
    """
    global _global_client

    if _global_client is None:
        _global_client = InstaparserClient(config=InstaparserConfig.from_env(**overrides))
    return _global_client


def reset_client() -> None:
    """Close and discard the singleton client."""
    global _global_client

    if _global_client is not None:
        _global_client.close()
        _global_client = None
