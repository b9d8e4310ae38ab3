"""
HTTP transport setup.

Provides the ``requests.Session`` factory used by the request executor, the
client's User-Agent string, and :class:`RequestOptions`, the per-call option
bag (timeouts, proxy, local bind address) forwarded to requests.

GBIF calls are single-shot: the mounted adapter never retries, errors go
straight back to the caller.

Usage::

    from gbif_client.http import create_session

    s = create_session()
    resp = s.get("https://api.gbif.org/v1/species/match", params={"name": "Puma"}, timeout=30)
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, urlsplit, urlunsplit

import requests
from pydantic import BaseModel, ConfigDict
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from gbif_client import __version__

#: No retries, no backoff. ``raise_on_status`` is left to our own status mapping.
NO_RETRY = Retry(total=0, raise_on_status=False)


def user_agent() -> str:
    """``python-requests/<ver> gbif-client/<ver>``"""
    return f"python-requests/{requests.__version__} gbif-client/{__version__}"


# =============================================================================
# Per-call options
# =============================================================================


class ProxyOptions(BaseModel):
    """Proxy server and optional credentials."""

    model_config = ConfigDict(extra="forbid")

    uri: str
    user: str | None = None
    password: str | None = None

    def url(self) -> str:
        """Proxy URI with credentials folded into the netloc."""
        if not self.user:
            return self.uri
        parts = urlsplit(self.uri)
        auth = quote(self.user, safe="")
        if self.password:
            auth += ":" + quote(self.password, safe="")
        return urlunsplit(parts._replace(netloc=f"{auth}@{parts.netloc}"))


class BindOptions(BaseModel):
    """Local address to bind outgoing connections to."""

    model_config = ConfigDict(extra="forbid")

    host: str
    port: int = 0


class RequestOptions(BaseModel):
    """
    Transport options for a single call.

    Attributes:
        timeout: Read timeout in seconds (also the connect timeout when
            ``open_timeout`` is unset).
        open_timeout: Connect timeout in seconds.
        proxy: Proxy to route the request through.
        bind: Local host/port for the outgoing socket.
    """

    model_config = ConfigDict(extra="forbid")

    timeout: float | None = None
    open_timeout: float | None = None
    proxy: ProxyOptions | None = None
    bind: BindOptions | None = None

    @classmethod
    def parse(cls, options: RequestOptions | dict[str, Any] | None) -> RequestOptions:
        """Accept an instance, a plain dict, or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)

    def request_kwargs(self, default_timeout: float) -> dict[str, Any]:
        """Keyword arguments for ``Session.get``."""
        read = self.timeout if self.timeout is not None else default_timeout
        connect = self.open_timeout if self.open_timeout is not None else read
        kwargs: dict[str, Any] = {"timeout": (connect, read)}
        if self.proxy is not None:
            proxy_url = self.proxy.url()
            kwargs["proxies"] = {"http": proxy_url, "https": proxy_url}
        return kwargs


# =============================================================================
# Sessions
# =============================================================================


class SourceAddressAdapter(HTTPAdapter):
    """``HTTPAdapter`` whose connections originate from a fixed local address."""

    def __init__(self, source_address: tuple[str, int], **kwargs: Any) -> None:
        self.source_address = source_address
        super().__init__(**kwargs)

    def init_poolmanager(self, *args: Any, **kwargs: Any) -> None:
        kwargs["source_address"] = self.source_address
        super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, *args: Any, **kwargs: Any) -> Any:
        kwargs["source_address"] = self.source_address
        return super().proxy_manager_for(*args, **kwargs)


def create_session(bind: BindOptions | None = None) -> requests.Session:
    """
    Build a ``requests.Session`` for GBIF calls.

    Args:
        bind: Optional local address; mounts a :class:`SourceAddressAdapter`.
    """
    s = requests.Session()
    if bind is not None:
        adapter: HTTPAdapter = SourceAddressAdapter((bind.host, bind.port), max_retries=NO_RETRY)
    else:
        adapter = HTTPAdapter(max_retries=NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)

    ua = user_agent()
    s.headers["User-Agent"] = ua
    s.headers["X-User-Agent"] = ua
    return s
