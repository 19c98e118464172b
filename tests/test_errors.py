from __future__ import annotations

import pytest


def test_try_parse_error():
    from url_tools import ErrorKind, MutableURL, URLParseError, URLToolsError

    with pytest.raises(URLParseError) as info:
        MutableURL.try_parse("")

    exc = info.value
    assert isinstance(exc, URLToolsError)
    assert isinstance(exc, ValueError)
    assert exc.kind is ErrorKind.URL_PARSE
    assert exc.url == ""
    assert isinstance(exc.source, ValueError)
    assert exc.__cause__ is exc.source
    assert str(exc) == "relative URL without a base"

    with pytest.raises(URLParseError):
        MutableURL.try_parse("/relative/path?a=1")


def test_parse_error():
    from url_tools import MutableURL, URLParseError, url_format

    with pytest.raises(URLParseError):
        MutableURL.parse("")

    with pytest.raises(URLParseError):
        url_format("{}", "relative")


def test_engine_error():
    from url_tools import MutableURL, URLParseError

    with pytest.raises(URLParseError) as info:
        MutableURL.try_parse(42)  # type: ignore[arg-type]

    assert isinstance(info.value.source, TypeError)
    assert info.value.__cause__ is info.value.source


def test_error_kinds():
    from url_tools import ErrorKind, URLQueryViewError, URLToolsError

    assert URLToolsError.kind is ErrorKind.UNKNOWN
    assert URLQueryViewError.kind is ErrorKind.QUERY_VIEW
    assert issubclass(URLQueryViewError, RuntimeError)
    assert {kind.value for kind in ErrorKind} == {"url_parse", "query_view", "unknown"}
