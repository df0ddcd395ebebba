"""Shared response decoding.

Every driver funnels its HTTP responses through :func:`decode`, which turns
a body into a domain value or a typed error and always extracts the request
id, pagination and rate-limit metadata from the headers.

"""
import json
import logging
import typing

import httpx
import pydantic

from scm_client import errors, models, services

LOGGER = logging.getLogger(__name__)

T = typing.TypeVar('T')


class HeaderScheme(pydantic.BaseModel):
    """Names of the provider's metadata headers."""

    model_config = pydantic.ConfigDict(frozen=True)

    request_id: str
    rate_limit: str
    rate_remaining: str
    rate_reset: str
    page_headers: bool = False  # X-Page / X-Next-Page fallback


GITHUB = HeaderScheme(
    request_id='X-GitHub-Request-Id',
    rate_limit='X-RateLimit-Limit',
    rate_remaining='X-RateLimit-Remaining',
    rate_reset='X-RateLimit-Reset',
)

GITLAB = HeaderScheme(
    request_id='X-Request-Id',
    rate_limit='RateLimit-Limit',
    rate_remaining='RateLimit-Remaining',
    rate_reset='RateLimit-Reset',
    page_headers=True,
)


class ErrorBody(pydantic.BaseModel):
    """Provider error payload for non-2xx responses."""

    model_config = pydantic.ConfigDict(extra='ignore')

    message: str | dict[str, typing.Any] | list[typing.Any] | None = None
    error: str | None = None
    error_description: str | None = None
    errors: list[typing.Any] = []

    def text(self) -> str | None:
        if isinstance(self.message, str) and self.message:
            return self.message
        if isinstance(self.message, dict) and self.message:
            return '; '.join(
                f'{key} {_join(value)}' for key, value in self.message.items()
            )
        if isinstance(self.message, list) and self.message:
            return _join(self.message)
        return self.error_description or self.error


def _join(value: typing.Any) -> str:
    if isinstance(value, list):
        return ', '.join(str(item) for item in value)
    return str(value)


def _int_header(headers: httpx.Headers, name: str) -> int:
    try:
        return int(headers.get(name, 0))
    except ValueError:
        return 0


def _page_number(url: str) -> int:
    try:
        return int(httpx.URL(url).params.get('page', 0))
    except (ValueError, httpx.InvalidURL):
        return 0


def parse_rate(headers: httpx.Headers, scheme: HeaderScheme) -> models.Rate:
    return models.Rate(
        limit=_int_header(headers, scheme.rate_limit),
        remaining=_int_header(headers, scheme.rate_remaining),
        reset=_int_header(headers, scheme.rate_reset),
    )


def parse_page(response: httpx.Response, scheme: HeaderScheme) -> models.Page:
    """Extract pagination from the ``Link`` header.

    Providers that also send ``X-Page`` style headers fall back to those
    when no ``Link`` header is present.

    """
    links = response.links
    if links:
        values = {
            rel: _page_number(links[rel]['url'])
            for rel in ('first', 'next', 'prev', 'last')
            if rel in links
        }
        return models.Page(
            next_url=links.get('next', {}).get('url', ''), **values
        )
    if scheme.page_headers and 'X-Page' in response.headers:
        last = _int_header(response.headers, 'X-Total-Pages')
        return models.Page(
            first=1 if last else 0,
            next=_int_header(response.headers, 'X-Next-Page'),
            prev=_int_header(response.headers, 'X-Prev-Page'),
            last=last,
        )
    return models.Page()


def metadata(
    response: httpx.Response, scheme: HeaderScheme
) -> models.ResponseMeta:
    return models.ResponseMeta(
        id=response.headers.get(scheme.request_id, ''),
        status=response.status_code,
        headers=dict(response.headers),
        page=parse_page(response, scheme),
        rate=parse_rate(response.headers, scheme),
    )


def error_for(
    response: httpx.Response, meta: models.ResponseMeta
) -> errors.SCMError:
    """Decode a non-2xx body into a typed error."""
    message, details = None, None
    if response.content:
        try:
            body = ErrorBody.model_validate(response.json())
        except (ValueError, pydantic.ValidationError):
            LOGGER.debug(
                'Non-JSON error body for %s (%s)',
                response.request.url,
                response.status_code,
            )
        else:
            message, details = body.text(), body.errors
    if not message:
        message = response.reason_phrase or f'HTTP {response.status_code}'
    exhausted = meta.rate.limit > 0 and meta.rate.remaining == 0
    return errors.from_status(
        response.status_code,
        message,
        rate_limited=exhausted or response.status_code == 429,
        reset_time=meta.rate.reset or None,
        details=details,
    )


def decode(
    response: httpx.Response,
    scheme: HeaderScheme,
    convert: typing.Callable[[typing.Any], T],
    default: typing.Callable[[], T],
) -> services.Result[T]:
    """Turn a response into a :class:`~scm_client.services.Result`.

    Args:
        response: The provider's HTTP response
        scheme: Header names to read metadata from
        convert: Maps the decoded JSON body to the domain value
        default: Builds the zero value returned alongside an error

    """
    meta = metadata(response, scheme)
    if not response.is_success:
        error = error_for(response, meta)
        LOGGER.debug(
            '%s %s returned %s: %s',
            response.request.method,
            response.request.url,
            response.status_code,
            error,
        )
        return services.Result(default(), meta, error)
    try:
        value = convert(response.json())
    except (ValueError, TypeError) as exc:
        LOGGER.warning(
            'Failed to decode response from %s: %s', response.request.url, exc
        )
        return services.Result(
            default(),
            meta,
            errors.DecodeError(
                f'Failed to decode response: {_summary(exc)}',
                response.status_code,
            ),
        )
    return services.Result(value, meta)


def _summary(exc: Exception) -> str:
    if isinstance(exc, pydantic.ValidationError):
        return f'{exc.error_count()} validation error(s)'
    if isinstance(exc, json.JSONDecodeError):
        return exc.msg
    return str(exc)
