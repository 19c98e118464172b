from __future__ import annotations

import pytest


@pytest.fixture()
def url():
    from url_tools import MutableURL

    return MutableURL.parse("https://example.com/search?q=python&page=1&page=2")


@pytest.fixture()
def query_pairs():
    def query_pairs(value) -> set[str]:
        _, _, query = str(value).partition("?")
        return set(query.split("&")) if query else set()

    return query_pairs
