"""URL-Tools includes a `url_tools.MutableURL` class that wraps :class:`yarl.URL` with a
unique-key view over its query string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Optional

from yarl import URL

from .constants import DEFAULT_URL, RELATIVE_URL_WITHOUT_BASE
from .errors import URLParseError, URLQueryViewError
from .logs import logger
from .query import QueryUnique

if TYPE_CHECKING:
    from multidict import MultiDictProxy

    from .types import TQueryCache, TQueryPairs, TURLInput


class MutableURL:
    """Represent a parsed URL.

    :param url: An already parsed :class:`yarl.URL`. The default placeholder
                (``none:``) is used when nothing is given. The URL is taken as is,
                without the absolute URL check of :py:meth:`try_parse`.

    The parsed value is owned by :pypi:`yarl`: every component is available through
    :py:attr:`url` or directly on the instance.

    .. code-block:: python

        url = MutableURL.parse("https://example.com/")
        with url.query_unique() as query:
            query.set_pair("hello", "world").set_pair("foo", "bar")

        assert url.query_unique_get("foo") == "bar"
        assert str(url) == "https://example.com/?hello=world&foo=bar"

    .. warning::
        The unique query cache is built once and is never rebuilt from the query string.
        Replacing the query through :py:attr:`url` after the cache exists leaves the cache
        stale, and the next closed view writes the stale cache back.

    """

    __slots__ = ("_url", "_cache", "_view")

    default_url: ClassVar[str] = DEFAULT_URL

    def __init__(self, url: Optional[URL] = None):
        if url is None:
            url = URL(self.default_url)

        elif isinstance(url, MutableURL):
            url = url.url

        elif not isinstance(url, URL):
            raise TypeError(f"Expected yarl.URL, got {type(url).__name__}")

        self._url: URL = url
        self._cache: Optional[TQueryCache] = None
        self._view: Optional[QueryUnique] = None

    @classmethod
    def try_parse(cls, value: TURLInput) -> MutableURL:
        """Parse the given value.

        :raises URLParseError: When the value is not an absolute URL

        `url = MutableURL.try_parse(untrusted)`
        """
        if isinstance(value, MutableURL):
            value = value.url

        if isinstance(value, URL):
            url = value

        else:
            try:
                url = URL(value)
            except (TypeError, ValueError) as exc:
                raise URLParseError(exc, value) from exc

        if not url.scheme:
            exc = ValueError(RELATIVE_URL_WITHOUT_BASE)
            raise URLParseError(exc, str(value)) from exc

        return cls(url)

    @classmethod
    def parse(cls, value: TURLInput) -> MutableURL:
        """Parse the given value, treating a failure as a programming error.

        The method is for literals and other values known to be valid. Never use it on
        untrusted input, use :py:meth:`try_parse` there.
        """
        return cls.try_parse(value)

    @classmethod
    def default(cls) -> MutableURL:
        """Create the placeholder URL."""
        return cls()

    @property
    def url(self) -> URL:
        """The wrapped :class:`yarl.URL`."""
        return self._url

    @url.setter
    def url(self, url: URL):
        self._check_view()
        self._url = url

    def replace(self, **parts: Any) -> MutableURL:
        """Replace the given URL parts using yarl's ``with_<part>`` builders.

        `url.replace(scheme="https", path="/index.html")`
        """
        self._check_view()
        url = self._url
        for name, value in parts.items():
            builder = getattr(url, f"with_{name}", None)
            if builder is None:
                raise TypeError(f"Unsupported URL part: {name}")
            url = builder(value)

        self._url = url
        return self

    def into_string(self) -> str:
        """Render the URL.

        A view which is still open is not reflected, close it first.
        """
        return str(self._url)

    def copy(self) -> MutableURL:
        """Copy the URL together with its unique query cache."""
        self._check_view()
        clone = type(self)(self._url)
        if self._cache is not None:
            clone._cache = dict(self._cache)
        return clone

    __copy__ = copy

    def query_unique(self) -> QueryUnique:
        """Access the query string as a mapping with unique keys.

        The mapping is backed by a cache which is only created by the first call of this
        method (or of ``query_unique_*`` ones). For repeated keys the last one wins.
        The query string is rebuilt from the cache when the view is closed.
        Removing every key drops the query part, ``?`` included.

        .. code-block:: python

            url = MutableURL.default()
            with url.query_unique() as query:
                query.set_pair("a", "1").set_pair("a", "2")

            assert str(url) == "none:?a=2"

        """
        self._check_view()
        cache = self._ensure_query_unique_cache()
        self._view = QueryUnique(self, cache)
        return self._view

    def query_unique_contains_key(self, key: str) -> bool:
        """Check the given key is in the unique query."""
        self._check_view()
        return key in self._ensure_query_unique_cache()

    def query_unique_get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a value from the unique query."""
        self._check_view()
        return self._ensure_query_unique_cache().get(key, default)

    def _check_view(self):
        if self._view is not None:
            raise URLQueryViewError("The URL is borrowed by an open query view")

    def _ensure_query_unique_cache(self) -> TQueryCache:
        if self._cache is None:
            query: MultiDictProxy[str] = self._url.query
            cache: TQueryCache = {}
            for key, value in query.items():
                cache[key] = value

            self._cache = cache
            logger.debug("Unique query cache is built for %s: %d keys", self, len(cache))

        return self._cache

    def _sync_query_unique_cache(self):
        cache = self._cache
        assert cache is not None, "The unique query cache is not built"
        pairs: TQueryPairs = list(cache.items())
        self._url = self._url.with_query(pairs)
        logger.debug("Query string is rebuilt for %s", self)

    def _release_query_unique(self, view: QueryUnique):
        if view is not self._view:
            raise URLQueryViewError("The query view does not belong to the URL")

        try:
            self._sync_query_unique_cache()
        finally:
            self._view = None

    def __getattr__(self, name: str) -> Any:
        """Proxy the URL's unknown attributes to the wrapped yarl.URL."""
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._url, name)

    def __str__(self) -> str:
        return str(self._url)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    def __hash__(self) -> int:
        return hash(self._url)

    def __eq__(self, other: object) -> bool:
        url = _as_url(other)
        if url is None:
            return NotImplemented
        return self._url == url

    def __lt__(self, other: object) -> bool:
        url = _as_url(other)
        if url is None:
            return NotImplemented
        return self._url < url

    def __le__(self, other: object) -> bool:
        url = _as_url(other)
        if url is None:
            return NotImplemented
        return self._url <= url

    def __gt__(self, other: object) -> bool:
        url = _as_url(other)
        if url is None:
            return NotImplemented
        return self._url > url

    def __ge__(self, other: object) -> bool:
        url = _as_url(other)
        if url is None:
            return NotImplemented
        return self._url >= url


def _as_url(value: object) -> Optional[URL]:
    if isinstance(value, MutableURL):
        return value.url
    if isinstance(value, URL):
        return value
    return None
