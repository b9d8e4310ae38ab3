"""
Exception hierarchy.

Everything raised by this package derives from :class:`GbifError`, so callers
can catch one type. Validation errors are raised before any network I/O;
HTTP errors carry the status code and response body unmodified.
"""

from __future__ import annotations

import requests


class GbifError(Exception):
    """Base class for all gbif-client errors."""


# ---------------------------------------------------------------------------
# Validation (raised before a request is attempted)
# ---------------------------------------------------------------------------


class InvalidResourceKind(GbifError, ValueError):
    """A category (or family) is not one of the allowed choices."""

    def __init__(self, value: object, choices: list[str]) -> None:
        self.value = value
        self.choices = choices
        super().__init__(f"{value!r} is not one of the choices: {', '.join(choices)}")


class MissingIdentifier(GbifError, ValueError):
    """The requested category needs an entity uuid but none was given."""

    def __init__(self, family: str, category: str, allowed: list[str]) -> None:
        self.family = family
        self.category = category
        super().__init__(
            f"You must specify a uuid for {family} data {category!r}; "
            f"only {', '.join(allowed)} can be fetched without one"
        )


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


class TransportError(GbifError):
    """DNS, connection, TLS or timeout failure below the HTTP layer."""


# ---------------------------------------------------------------------------
# HTTP status
# ---------------------------------------------------------------------------


class HTTPError(GbifError):
    """GBIF answered with a non-2xx status."""

    status_code: int | None = None

    def __init__(self, message: str, status_code: int | None = None, body: str = "", url: str = "") -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        self.body = body
        self.url = url


class BadRequest(HTTPError):
    """HTTP 400."""

    status_code = 400


class NotFound(HTTPError):
    """HTTP 404."""

    status_code = 404


class InternalServerError(HTTPError):
    """HTTP 500."""

    status_code = 500


class BadGateway(HTTPError):
    """HTTP 502."""

    status_code = 502


class ServiceUnavailable(HTTPError):
    """HTTP 503."""

    status_code = 503


class GatewayTimeout(HTTPError):
    """HTTP 504."""

    status_code = 504


STATUS_ERRORS: dict[int, type[HTTPError]] = {
    cls.status_code: cls  # type: ignore[misc]
    for cls in (BadRequest, NotFound, InternalServerError, BadGateway, ServiceUnavailable, GatewayTimeout)
}


def raise_for_status(resp: requests.Response) -> None:
    """
    Raise the typed error matching ``resp.status_code``, if it is not 2xx.

    Unmapped error codes (401, 403, 429, ...) raise a plain :class:`HTTPError`.
    The exception message is the response body, or the reason phrase when the
    body is empty.
    """
    if 200 <= resp.status_code < 300:
        return

    body = resp.text or ""
    message = body.strip() or f"{resp.status_code} {resp.reason or ''}".strip()
    error_cls = STATUS_ERRORS.get(resp.status_code, HTTPError)
    raise error_cls(message, status_code=resp.status_code, body=body, url=resp.url or "")
