"""Fluent request builder for API requests."""
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from ..config import APIConfig
from .models import RequestDescriptor
from ...exceptions import InvalidUrlError
from ...logging import get_logger

ParamValue = Union[str, int, float]

# Path characters left as-is; existing %XX escapes survive
_PATH_SAFE = "/:@!$&'()*+,;=-._~%"


class RequestBuilder:
    """
    Accumulates request configuration through chained calls.

    Every setter stores its value and returns the same instance, so a
    whole request reads as one expression:

        >>> url = (RequestBuilder()
        ...        .set_path('/api/articles')
        ...        .set_query_params({'limit': 10, 'offset': 0})
        ...        .compose_url())
        >>> url
        'https://conduit-api.bondaracademy.com/api/articles?limit=10&offset=0'

    Setters overwrite, they never merge: a second ``set_headers`` or
    ``set_query_params`` call replaces everything the first one stored.

    The builder performs no I/O. A transport bound with
    ``bind_transport`` is only kept for the dispatcher to use.
    """

    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize request builder.

        Args:
            config: API configuration (uses defaults if not provided)
        """
        self._config = config or APIConfig.default()
        self._transport: Any = None
        self._logger = get_logger('request')
        self._clear()

    def _clear(self):
        self._base_url = ''
        self._path = ''
        self._query_params: Dict[str, ParamValue] = {}
        self._headers: Dict[str, str] = {}
        self._body: Any = None

    # Configuration

    def set_base_url(self, url: str) -> 'RequestBuilder':
        """Set the origin requests are sent to. Not validated until composed."""
        self._base_url = url
        return self

    def set_path(self, path: str) -> 'RequestBuilder':
        """Set the endpoint path, with or without a leading slash."""
        self._path = path
        return self

    def set_query_params(self, params: Mapping[str, ParamValue]) -> 'RequestBuilder':
        """Replace the query parameters."""
        self._query_params = dict(params)
        return self

    def set_headers(self, headers: Mapping[str, str]) -> 'RequestBuilder':
        """Replace the headers."""
        self._headers = dict(headers)
        return self

    def set_body(self, body: Any) -> 'RequestBuilder':
        """Set the request payload. Stored as given."""
        self._body = body
        return self

    def bind_transport(self, transport: Any) -> 'RequestBuilder':
        """
        Bind the transport that will eventually send this request.

        Args:
            transport: Any object with a ``request(method, url, ...)``
                method, e.g. ``requests.Session`` or
                ``aiohttp.ClientSession``. Never called by the builder.
        """
        self._transport = transport
        return self

    def reset(self) -> 'RequestBuilder':
        """Restore every facet except the bound transport to its initial value."""
        self._clear()
        return self

    # Accessors

    @property
    def default_origin(self) -> str:
        return self._config.default_origin

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def path(self) -> str:
        return self._path

    @property
    def query_params(self) -> Dict[str, ParamValue]:
        return dict(self._query_params)

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @property
    def body(self) -> Any:
        return self._body

    @property
    def transport(self) -> Any:
        return self._transport

    # Composition

    def compose_url(self) -> str:
        """
        Compose the absolute request URL.

        The origin is the base URL, or the default origin when no base
        URL is set. Exactly one slash separates it from the path, and
        query parameters are appended form-encoded in insertion order.

        Returns:
            Absolute URL string

        Raises:
            InvalidUrlError: If the origin has no scheme or host
        """
        origin = self._base_url or self._config.default_origin
        try:
            parts = urlsplit(origin)
        except ValueError as e:
            raise InvalidUrlError(f"Invalid origin {origin!r}: {e}", url=origin) from e

        if not parts.scheme or not parts.netloc:
            raise InvalidUrlError(
                f"Origin must be an absolute URL with scheme and host: {origin!r}",
                url=origin
            )

        url = urlunsplit((
            parts.scheme,
            parts.netloc,
            self._join_path(parts.path, self._path),
            self._join_query(parts.query, self._query_params),
            parts.fragment,
        ))
        self._logger.debug("Composed URL: %s", url)
        return url

    def build(self, method: str = 'GET') -> RequestDescriptor:
        """
        Snapshot the current configuration as a request descriptor.

        Args:
            method: HTTP method

        Returns:
            RequestDescriptor carrying the composed URL, headers and body
        """
        return RequestDescriptor(
            method=method.upper(),
            url=self.compose_url(),
            headers=dict(self._headers),
            body=self._body,
        )

    @staticmethod
    def _join_path(origin_path: str, path: str) -> str:
        tail = quote(path.lstrip('/'), safe=_PATH_SAFE)
        if not tail:
            return origin_path or '/'
        return f"{origin_path.rstrip('/')}/{tail}"

    @staticmethod
    def _join_query(origin_query: str, params: Mapping[str, ParamValue]) -> str:
        encoded = urlencode(list(params.items()))
        if origin_query and encoded:
            return f"{origin_query}&{encoded}"
        return origin_query or encoded

    def __repr__(self) -> str:
        return (
            f"RequestBuilder(base_url={self._base_url!r}, path={self._path!r}, "
            f"query_params={self._query_params!r}, headers={list(self._headers)!r}, "
            f"transport={'bound' if self._transport is not None else None})"
        )
