from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional


class ErrorKind(Enum):
    """Kinds of URL-Tools errors.

    The set is open: new kinds may be added in later releases, so code
    which dispatches on ``error.kind`` should keep a fallback branch.
    """

    URL_PARSE = "url_parse"
    QUERY_VIEW = "query_view"

    # reserved for future kinds
    UNKNOWN = "unknown"


class URLToolsError(Exception):
    """Base class for URL-Tools Errors."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN


class URLParseError(URLToolsError, ValueError):
    """Raise when the underlying URL engine rejects an input."""

    kind = ErrorKind.URL_PARSE

    def __init__(self, source: BaseException, url: Optional[str] = None):
        super().__init__(source)
        self.source = source
        self.url = url

    def __str__(self) -> str:
        return str(self.source)


class URLQueryViewError(URLToolsError, RuntimeError):
    """Raise when a unique query view is used incorrectly."""

    kind = ErrorKind.QUERY_VIEW
