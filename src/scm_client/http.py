import http
import logging
import ssl
import typing

import httpx
import truststore

from scm_client import version

LOGGER = logging.getLogger(__name__)

HTTPStatus = http.HTTPStatus

HTTP_METHODS = frozenset(
    {'delete', 'get', 'head', 'options', 'patch', 'post', 'put'}
)


class Client:
    """Thin wrapper around :class:`httpx.AsyncClient`.

    Attribute access falls through to the wrapped client so callers can use
    ``get``, ``post`` and friends directly.

    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = 30.0,
    ) -> None:
        self.http_client = httpx.AsyncClient(
            headers={
                'Content-Type': 'application/json',
                'User-Agent': f'scm-client/{version}',
            },
            transport=transport,
            timeout=timeout,
            verify=truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT),
        )

    def __getattr__(self, name: str) -> typing.Any:
        if name == 'http_client':
            raise AttributeError(name)
        return getattr(self.http_client, name)

    def add_header(self, key: str, value: str) -> None:
        self.http_client.headers[key] = value

    async def aclose(self) -> None:
        await self.http_client.aclose()


class BaseURLClient(Client):
    """Client that resolves relative request paths against a base URL."""

    _base_url: str = 'https://api.example.com'

    @property
    def base_url(self) -> str:
        return self._base_url

    def __getattr__(self, name: str) -> typing.Any:
        attr = super().__getattr__(name)
        if name not in HTTP_METHODS or not callable(attr):
            return attr

        def wrapper(url: str, *args: typing.Any, **kwargs: typing.Any):
            url = self._prepend_base_url(url)
            LOGGER.debug('Using URL: %s', url)
            return attr(url, *args, **kwargs)

        return wrapper

    async def request(
        self, method: str, url: str, **kwargs: typing.Any
    ) -> httpx.Response:
        url = self._prepend_base_url(url)
        LOGGER.debug('Using URL: %s %s', method, url)
        return await self.http_client.request(method, url, **kwargs)

    def _prepend_base_url(self, path: str) -> str:
        if path.startswith(('http://', 'https://', '//')):
            return path
        return f'{self.base_url.rstrip("/")}/{path.lstrip("/")}'
