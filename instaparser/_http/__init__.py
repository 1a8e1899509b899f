"""
HTTP Client Module

Sync and async HTTP clients for Instaparser API communication.
"""

from .client import AsyncHTTPClient, HTTPClient
from .errors import ErrorKind, InstaparserError, raise_for_status

__all__ = [
    "AsyncHTTPClient",
    "ErrorKind",
    "HTTPClient",
    "InstaparserError",
    "raise_for_status",
]
