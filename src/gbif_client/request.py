"""
Request executor.

One GET per call against ``settings.base_url``, query mapping encoded by
requests (lists become repeated keys: ``issue=A&issue=B``), JSON body
returned as plain Python data. Non-2xx statuses raise the typed errors from
:mod:`gbif_client.errors`; connection-level failures raise
:class:`~gbif_client.errors.TransportError`.

The API modules call the module-level :func:`perform`, which uses a default
:class:`Client` bound to the process-wide settings. Build a ``Client``
directly to use different settings or a custom session.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager, nullcontext
from typing import Any

import requests

from gbif_client.config import Settings, get_settings
from gbif_client.errors import GbifError, TransportError, raise_for_status
from gbif_client.http import RequestOptions, create_session
from gbif_client.params import normalize

logger = logging.getLogger(__name__)


def _log_response(resp: requests.Response, *args: Any, **kwargs: Any) -> None:
    """Response hook used in verbose mode."""
    req = resp.request
    logger.info("request: %s %s", req.method, req.url)
    for name, value in req.headers.items():
        logger.info("request header: %s: %s", name, value)
    logger.info("response: %s %s", resp.status_code, resp.reason)
    for name, value in resp.headers.items():
        logger.info("response header: %s: %s", name, value)


@contextmanager
def _echo_to_stdout() -> Iterator[None]:
    """Print this module's INFO records on stdout for the duration of a verbose call.

    Records still propagate, so handlers configured by the application see them too.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous = logger.level
    logger.addHandler(handler)
    if not logger.isEnabledFor(logging.INFO):
        logger.setLevel(logging.INFO)
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)


class Client:
    """Performs GBIF API requests with a fixed configuration."""

    def __init__(self, settings: Settings | None = None, session: requests.Session | None = None) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.session = session if session is not None else create_session()

    def url_for(self, path: str) -> str:
        return f"{self.settings.base_url.rstrip('/')}/{path.lstrip('/')}"

    def perform(
        self,
        path: str,
        query: Mapping[str, Any] | None = None,
        verbose: bool = False,
        options: RequestOptions | dict[str, Any] | None = None,
    ) -> Any:
        """
        GET ``path`` and return the decoded JSON body.

        Args:
            path: Path relative to the API root (e.g. ``"species/match"``).
            query: Query parameters; ``None`` values are dropped.
            verbose: Log request and response metadata at INFO and print it to stdout.
            options: Per-call transport options (timeouts, proxy, bind). With
                ``bind`` the request goes through a fresh session that keeps
                only the headers of the client's session.

        Returns:
            The parsed JSON value, unmodified.

        Raises:
            HTTPError: (or a subclass) for non-2xx responses.
            TransportError: for DNS, connect, TLS and timeout failures.
        """
        opts = RequestOptions.parse(options)
        kwargs = opts.request_kwargs(self.settings.timeout)
        if self.settings.has_credentials:
            kwargs["auth"] = (self.settings.user_name, self.settings.pwd)
        if verbose:
            kwargs["hooks"] = {"response": [_log_response]}

        url = self.url_for(path)
        params = normalize(query or {})

        session = self._session_for(opts)
        try:
            with _echo_to_stdout() if verbose else nullcontext():
                resp = session.get(url, params=params, **kwargs)
        except requests.RequestException as exc:
            raise TransportError(f"GET {url} failed: {exc}") from exc
        finally:
            if session is not self.session:
                session.close()

        raise_for_status(resp)
        try:
            return resp.json()
        except requests.JSONDecodeError as exc:
            raise GbifError(f"GET {url} returned a non-JSON body") from exc

    def _session_for(self, opts: RequestOptions) -> requests.Session:
        """Session for one call.

        A bind address needs its own adapter, hence its own session. Headers
        of the client's session are carried over; its adapters, cookies and
        auth are not.
        """
        if opts.bind is None:
            return self.session
        bound = create_session(bind=opts.bind)
        bound.headers.update(self.session.headers)
        return bound

    def close(self) -> None:
        self.session.close()


# ---------------------------------------------------------------------------
# Default client (module-level state)
# ---------------------------------------------------------------------------
_default_client: Client | None = None


def get_client() -> Client:
    """Return the default client, creating it from the current settings."""
    global _default_client  # noqa: PLW0603
    if _default_client is None:
        _default_client = Client(get_settings())
    return _default_client


def reset_default_client() -> None:
    """Close and forget the default client."""
    global _default_client  # noqa: PLW0603
    if _default_client is not None:
        _default_client.close()
    _default_client = None


def perform(
    path: str,
    query: Mapping[str, Any] | None = None,
    verbose: bool = False,
    options: RequestOptions | dict[str, Any] | None = None,
) -> Any:
    """:meth:`Client.perform` on the default client."""
    return get_client().perform(path, query, verbose=verbose, options=options)
