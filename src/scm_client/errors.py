import enum
import typing


class ErrorKind(enum.StrEnum):
    """Broad category of a failed call, for matching without substrings."""

    not_found = 'not_found'
    unauthorized = 'unauthorized'
    forbidden = 'forbidden'
    rate_limited = 'rate_limited'
    validation = 'validation'
    server = 'server'
    http = 'http'
    transport = 'transport'
    decode = 'decode'
    not_supported = 'not_supported'


class SCMError(Exception):
    """Base class for every error returned by a service call.

    ``str(error)`` is the provider's own message, e.g. ``Not Found``.

    """

    kind: typing.ClassVar[ErrorKind] = ErrorKind.http

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}({self.message!r}, '
            f'status_code={self.status_code!r})'
        )


class HTTPError(SCMError):
    """Non-2xx response without a more specific category."""

    kind = ErrorKind.http


class NotFoundError(SCMError):
    kind = ErrorKind.not_found


class UnauthorizedError(SCMError):
    kind = ErrorKind.unauthorized


class ForbiddenError(SCMError):
    kind = ErrorKind.forbidden


class RateLimitError(SCMError):
    """Raised when the provider rate limit is exhausted."""

    kind = ErrorKind.rate_limited

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reset_time: int | None = None,
    ) -> None:
        super().__init__(message, status_code)
        self.reset_time = reset_time


class ValidationError(SCMError):
    """The provider rejected the request payload (422)."""

    kind = ErrorKind.validation

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[typing.Any] | None = None,
    ) -> None:
        super().__init__(message, status_code)
        self.errors = errors or []


class ServerError(SCMError):
    kind = ErrorKind.server


class TransportError(SCMError):
    """The request never produced an HTTP response."""

    kind = ErrorKind.transport


class DecodeError(SCMError):
    """The response body could not be decoded."""

    kind = ErrorKind.decode


class NotSupportedError(SCMError):
    kind = ErrorKind.not_supported

    def __init__(self, message: str = 'Not Supported') -> None:
        super().__init__(message)


_STATUS_ERRORS: dict[int, type[SCMError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    410: NotFoundError,
    429: RateLimitError,
}


def from_status(
    status_code: int,
    message: str,
    *,
    rate_limited: bool = False,
    reset_time: int | None = None,
    details: list[typing.Any] | None = None,
) -> SCMError:
    """Build the typed error for a non-2xx HTTP status.

    Args:
        status_code: HTTP status of the response
        message: Provider error text
        rate_limited: True when the rate-limit headers report exhaustion
        reset_time: Epoch seconds at which the rate limit resets
        details: Provider validation details, if any

    Returns:
        An instance of the matching :class:`SCMError` subclass

    """
    if rate_limited and status_code in (403, 429):
        return RateLimitError(message, status_code, reset_time)
    if status_code == 422:
        return ValidationError(message, status_code, details)
    if status_code >= 500:
        return ServerError(message, status_code)
    cls = _STATUS_ERRORS.get(status_code, HTTPError)
    if cls is RateLimitError:
        return RateLimitError(message, status_code, reset_time)
    return cls(message, status_code)
