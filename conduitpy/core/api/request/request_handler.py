"""Request dispatch over a builder's bound transport."""
import logging
from typing import Any, Callable, Dict, Optional

from ..config import APIConfig
from ..events import EventEmitter
from .models import RequestDescriptor
from .request_builder import RequestBuilder
from ...exceptions import TransportNotBoundError
from ...logging import get_logger


class RequestHandler:
    """
    Sends the request a builder describes through its bound transport.

    The transport is whatever the caller bound on the builder, usually
    a ``requests.Session`` for ``send`` or an ``aiohttp.ClientSession``
    for ``send_async``. Responses are returned untouched and transport
    errors propagate unchanged.

    Events:
        request: emitted with the descriptor before dispatch
        response: emitted with the descriptor and response after dispatch

    Example:
        >>> with requests.Session() as session:
        ...     api = RequestBuilder().bind_transport(session)
        ...     response = RequestHandler(api.set_path('/api/tags')).get()
    """

    def __init__(self, builder: RequestBuilder, config: Optional[APIConfig] = None):
        """
        Initialize request handler.

        Args:
            builder: Builder holding the request configuration and transport
            config: API configuration (uses defaults if not provided)
        """
        self._builder = builder
        self._config = config or APIConfig.default()
        self._events = EventEmitter()

        self._logger = get_logger('dispatch')
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    def on(self, event: str, callback: Callable) -> 'RequestHandler':
        """Register an event handler."""
        self._events.on(event, callback)
        return self

    def off(self, event: str, callback: Optional[Callable] = None) -> 'RequestHandler':
        """Remove an event handler."""
        self._events.off(event, callback)
        return self

    def _prepare(self, method: str):
        transport = self._builder.transport
        if transport is None:
            raise TransportNotBoundError(
                "No transport bound; call bind_transport() on the builder first"
            )
        descriptor = self._builder.build(method)
        self._events.emit('request', descriptor)
        self._logger.info("%s %s", descriptor.method, descriptor.url)
        return transport, descriptor

    @staticmethod
    def _request_kwargs(descriptor: RequestDescriptor, timeout: Any) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            'headers': descriptor.headers,
            'timeout': timeout,
        }
        if descriptor.has_body:
            kwargs['json'] = descriptor.body
        return kwargs

    def _finish(self, descriptor: RequestDescriptor, response: Any) -> Any:
        self._logger.debug(
            "%s %s -> %s",
            descriptor.method,
            descriptor.url,
            getattr(response, 'status_code', getattr(response, 'status', None))
        )
        self._events.emit('response', descriptor, response)
        return response

    # Sync dispatch

    def send(self, method: str = 'GET') -> Any:
        """
        Send the request through the bound transport.

        Args:
            method: HTTP method

        Returns:
            The transport's response object

        Raises:
            TransportNotBoundError: If the builder has no transport
            InvalidUrlError: If the URL cannot be composed
        """
        transport, descriptor = self._prepare(method)
        response = transport.request(
            descriptor.method,
            descriptor.url,
            **self._request_kwargs(descriptor, self._config.timeout.to_requests_timeout())
        )
        return self._finish(descriptor, response)

    def get(self) -> Any:
        return self.send('GET')

    def post(self) -> Any:
        return self.send('POST')

    def put(self) -> Any:
        return self.send('PUT')

    def patch(self) -> Any:
        return self.send('PATCH')

    def delete(self) -> Any:
        return self.send('DELETE')

    # Async dispatch

    async def send_async(self, method: str = 'GET') -> Any:
        """
        Send the request through a bound async transport.

        Args:
            method: HTTP method

        Returns:
            The transport's response object
        """
        transport, descriptor = self._prepare(method)
        response = await transport.request(
            descriptor.method,
            descriptor.url,
            **self._request_kwargs(descriptor, self._config.timeout.to_aiohttp_timeout())
        )
        return self._finish(descriptor, response)

    async def get_async(self) -> Any:
        return await self.send_async('GET')

    async def post_async(self) -> Any:
        return await self.send_async('POST')

    async def put_async(self) -> Any:
        return await self.send_async('PUT')

    async def delete_async(self) -> Any:
        return await self.send_async('DELETE')
