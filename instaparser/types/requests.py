"""
Request models for Instaparser API calls.

Each model serializes to exactly the fields the API expects via
``to_payload()``; optional fields that are unset are left out.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from .._http.errors import InstaparserError


class OutputFormat(str, Enum):
    """Body format returned for articles and PDFs."""

    HTML = "html"
    TEXT = "text"


def parse_output_format(output: Union[str, OutputFormat]) -> OutputFormat:
    """
    Validate an ``output`` argument.

    Raises:
        InstaparserError: VALIDATION kind if output is not 'html' or 'text'.
    """
    try:
        return OutputFormat(output)
    except ValueError:
        raise InstaparserError.validation("output must be 'html' or 'text'") from None


def use_cache_flag(use_cache: bool) -> Optional[str]:
    """
    Convert ``use_cache`` into its wire value.

    The API only understands the string ``"false"`` to disable caching;
    caching on is expressed by omitting the field.
    """
    return None if use_cache else "false"


class InstaparserRequestBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ArticleRequest(InstaparserRequestBase):
    url: str
    output: OutputFormat = OutputFormat.HTML
    use_cache: Optional[str] = None
    content: Optional[str] = None


class SummaryRequest(InstaparserRequestBase):
    url: str
    stream: bool = False
    use_cache: Optional[str] = None
    content: Optional[str] = None


class PDFRequest(InstaparserRequestBase):
    """Fields for ``/api/1/pdf``: query params for GET, form fields for upload."""

    output: OutputFormat = OutputFormat.HTML
    use_cache: Optional[str] = None
    url: Optional[str] = None
