"""
Result models for Instaparser API responses.

Articles and PDFs share one data shape; the ``kind`` tag tells them apart.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentKind(str, Enum):
    """Source type of a parsed document."""

    ARTICLE = "article"
    PDF = "pdf"


class InstaparserResponseBase(BaseModel):
    """Base for all result models: immutable, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Article(InstaparserResponseBase):
    """A parsed article or PDF."""

    kind: DocumentKind = Field(default=DocumentKind.ARTICLE, description="Source document type")
    url: Optional[str] = Field(default=None, description="Canonical URL of the document")
    title: Optional[str] = Field(default=None, description="Document title")
    site_name: Optional[str] = Field(default=None, description="Name of the website")
    author: Optional[str] = Field(default=None, description="Author name")
    date: Optional[int] = Field(default=None, description="Published date as UNIX timestamp")
    description: Optional[str] = Field(default=None, description="Document description")
    thumbnail: Optional[str] = Field(default=None, description="Thumbnail image URL")
    words: int = Field(default=0, description="Number of words")
    is_rtl: bool = Field(default=False, description="Whether the text is right-to-left")
    images: List[str] = Field(default_factory=list, description="Images in the document")
    videos: List[str] = Field(default_factory=list, description="Embedded videos")
    html: Optional[str] = Field(default=None, description="HTML body (output='html')")
    text: Optional[str] = Field(default=None, description="Plain text body (output='text')")

    @property
    def body(self) -> Optional[str]:
        """The document body, HTML or text depending on the requested output."""
        return self.html or self.text

    @property
    def is_pdf(self) -> bool:
        return self.kind is DocumentKind.PDF

    def __str__(self) -> str:
        return self.body or ""

    def __repr__(self) -> str:
        name = "PDF" if self.is_pdf else "Article"
        return f"<{name} url={self.url!r} title={self.title!r}>"


class Summary(InstaparserResponseBase):
    """Summary of an article: key sentences plus a short overview."""

    key_sentences: List[str] = Field(default_factory=list, description="Key sentences extracted from the article")
    overview: str = Field(default="", description="Concise summary of the article")

    def __str__(self) -> str:
        return self.overview

    def __repr__(self) -> str:
        preview = self.overview
        if len(preview) > 50:
            preview = preview[:50] + "..."
        return f"<Summary overview={preview!r} key_sentences={len(self.key_sentences)}>"


def _document_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """Pick the document fields out of a response, applying defaults for missing or null values."""
    return {
        "url": data.get("url"),
        "title": data.get("title"),
        "site_name": data.get("site_name"),
        "author": data.get("author"),
        "date": data.get("date"),
        "description": data.get("description"),
        "thumbnail": data.get("thumbnail"),
        "words": data.get("words") or 0,
        "is_rtl": bool(data.get("is_rtl") or False),
        "images": data.get("images") or [],
        "videos": data.get("videos") or [],
        "html": data.get("html"),
        "text": data.get("text"),
    }


def article_from_response(data: Dict[str, Any]) -> Article:
    """Build an Article from an ``/api/1/article`` response body."""
    return Article(kind=DocumentKind.ARTICLE, **_document_fields(data))


def pdf_from_response(data: Dict[str, Any]) -> Article:
    """
    Build a PDF result from an ``/api/1/pdf`` response body.

    PDFs are never right-to-left and never carry videos, whatever the
    response says.
    """
    fields = _document_fields(data)
    fields["is_rtl"] = False
    fields["videos"] = []
    return Article(kind=DocumentKind.PDF, **fields)


def summary_from_response(data: Dict[str, Any]) -> Summary:
    """Build a Summary from a non-streaming ``/api/1/summary`` response body."""
    return Summary(
        key_sentences=data.get("key_sentences") or [],
        overview=data.get("overview") or "",
    )
