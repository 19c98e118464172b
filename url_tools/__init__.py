""" URL-Tools -- Tools to make URLs ergonomic """
from __future__ import annotations

from .constants import DEFAULT_URL
from .errors import ErrorKind, URLParseError, URLQueryViewError, URLToolsError
from .query import QueryUnique
from .url import MutableURL
from .utils import try_url_format, url_format

__all__ = (
    # Errors
    "ErrorKind",
    "URLParseError",
    "URLQueryViewError",
    "URLToolsError",
    # URL
    "DEFAULT_URL",
    "MutableURL",
    "QueryUnique",
    # Utils
    "try_url_format",
    "url_format",
)
