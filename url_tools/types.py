from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Union

if TYPE_CHECKING:
    from yarl import URL

    from .url import MutableURL

TQueryCache = dict[str, str]
TQueryPairs = Iterable[tuple[str, str]]
TURLInput = Union[str, "URL", "MutableURL"]
