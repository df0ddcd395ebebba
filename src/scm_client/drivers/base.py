import logging
import typing

import httpx

from scm_client import decoder, errors, http, models, services

LOGGER = logging.getLogger(__name__)

T = typing.TypeVar('T')


class DriverClient(http.BaseURLClient):
    """HTTP client for a single provider, returning decoded results."""

    header_scheme: decoder.HeaderScheme = decoder.GITHUB

    async def send(
        self,
        method: str,
        path: str,
        convert: typing.Callable[[typing.Any], T],
        default: typing.Callable[[], T],
        params: dict[str, typing.Any] | None = None,
        body: dict[str, typing.Any] | None = None,
    ) -> services.Result[T]:
        """Issue a request and decode the response.

        Transport failures are returned as :class:`errors.TransportError`.
        Task cancellation is not intercepted.

        """
        try:
            response = await self.request(
                method, path, params=params, json=body
            )
        except httpx.TransportError as exc:
            LOGGER.warning('%s %s failed: %s', method, path, exc)
            return services.Result(
                default(),
                models.ResponseMeta(),
                errors.TransportError(str(exc) or exc.__class__.__name__),
            )
        return decoder.decode(response, self.header_scheme, convert, default)


def list_params(options: models.ListOptions | None) -> dict[str, int]:
    """Query parameters for a list call, omitting unset values."""
    params = {}
    if options and options.page:
        params['page'] = options.page
    if options and options.size:
        params['per_page'] = options.size
    return params


def split_repo(repo: str) -> tuple[str, str]:
    """Split ``namespace/name``, keeping nested namespaces intact."""
    namespace, _sep, name = repo.rpartition('/')
    return namespace, name
