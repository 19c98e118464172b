"""URL-Tools Utils."""

from __future__ import annotations

from typing import Any

from .url import MutableURL


def url_format(template: str, *args: Any, **kwargs: Any) -> MutableURL:
    """Format the given template and parse the result with :py:meth:`MutableURL.parse`.

    `url = url_format("{}://{}/?a={}", "https", "example.com", 42)`
    """
    return MutableURL.parse(template.format(*args, **kwargs))


def try_url_format(template: str, *args: Any, **kwargs: Any) -> MutableURL:
    """Format the given template and parse the result with :py:meth:`MutableURL.try_parse`."""
    return MutableURL.try_parse(template.format(*args, **kwargs))
