from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from typing import TYPE_CHECKING, Any, Optional

from .errors import URLQueryViewError

if TYPE_CHECKING:
    from types import TracebackType

    from .types import TQueryCache
    from .url import MutableURL


class QueryUnique(MutableMapping[str, str]):
    """A mapping view over a URL's query string where every key is unique.

    The view borrows its URL exclusively: while the view is open, the URL refuses to be
    changed or to open another view. Closing the view rebuilds the URL's query string
    from the mapping, which happens exactly once. Use the view as a context manager so
    it is closed on every exit path.

    .. code-block:: python

        with url.query_unique() as query:
            query.set_pair("page", "2")
            query.pop("debug", None)

    """

    __slots__ = ("_owner", "_cache", "_closed")

    def __init__(self, owner: MutableURL, cache: TQueryCache):
        self._owner = owner
        self._cache = cache
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def set_pair(self, key: str, value: str) -> QueryUnique:
        """Insert or overwrite the given pair and return the view for chaining."""
        self[key] = value
        return self

    def close(self):
        """Write the mapping back into the URL's query string and release the URL."""
        if self._closed:
            return

        self._closed = True
        self._owner._release_query_unique(self)

    def _get_cache(self) -> TQueryCache:
        if self._closed:
            raise URLQueryViewError("The query view is closed")
        return self._cache

    def __getitem__(self, key: str) -> str:
        return self._get_cache()[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not (isinstance(key, str) and isinstance(value, str)):
            raise TypeError("Query keys and values should be strings")
        self._get_cache()[key] = value

    def __delitem__(self, key: str) -> None:
        del self._get_cache()[key]

    def __contains__(self, key: Any) -> bool:
        return key in self._get_cache()

    def __iter__(self) -> Iterator[str]:
        return iter(self._get_cache())

    def __len__(self) -> int:
        return len(self._get_cache())

    def __repr__(self) -> str:
        state = "closed" if self._closed else dict(self._cache)
        return f"<QueryUnique {state}>"

    def __enter__(self) -> QueryUnique:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()
