"""
Instaparser request and result types.
"""

from .requests import (
    ArticleRequest,
    OutputFormat,
    PDFRequest,
    SummaryRequest,
    parse_output_format,
    use_cache_flag,
)
from .responses import (
    Article,
    DocumentKind,
    Summary,
    article_from_response,
    pdf_from_response,
    summary_from_response,
)

__all__ = [
    "Article",
    "ArticleRequest",
    "DocumentKind",
    "OutputFormat",
    "PDFRequest",
    "Summary",
    "SummaryRequest",
    "article_from_response",
    "parse_output_format",
    "pdf_from_response",
    "summary_from_response",
    "use_cache_flag",
]
