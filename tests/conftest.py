"""Shared fixtures: a stubbed HTTP transport and clean configuration."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import patch
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
from requests.adapters import HTTPAdapter

from gbif_client import config


def make_response(
    prepared: requests.PreparedRequest,
    status: int = 200,
    body: Any = None,
    text: str | None = None,
    headers: dict[str, str] | None = None,
) -> requests.Response:
    """Build a ``requests.Response`` as the adapter would return it."""
    resp = requests.Response()
    resp.status_code = status
    resp.reason = {200: "OK", 400: "Bad Request", 404: "Not Found"}.get(status, "")
    content = text if text is not None else json.dumps(body if body is not None else {})
    resp._content = content.encode("utf-8")
    resp.encoding = "utf-8"
    resp.headers.update(headers or {"Content-Type": "application/json"})
    resp.url = prepared.url or ""
    resp.request = prepared
    return resp


class StubTransport:
    """Records every prepared request and answers with a canned body."""

    def __init__(self) -> None:
        self.status = 200
        self.body: Any = {}
        self.text: str | None = None
        self.exc: Exception | None = None
        self.requests: list[requests.PreparedRequest] = []
        self.kwargs: list[dict[str, Any]] = []

    def __call__(self, prepared: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.requests.append(prepared)
        self.kwargs.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return make_response(prepared, status=self.status, body=self.body, text=self.text)

    @property
    def last(self) -> requests.PreparedRequest:
        return self.requests[-1]

    @property
    def path(self) -> str:
        return urlsplit(self.last.url).path

    @property
    def query(self) -> dict[str, list[str]]:
        return parse_qs(urlsplit(self.last.url).query, keep_blank_values=True)

    @property
    def raw_query(self) -> str:
        return urlsplit(self.last.url).query


@pytest.fixture
def transport() -> Iterator[StubTransport]:
    """Patch the adapter so no request leaves the process."""
    stub = StubTransport()
    with patch.object(HTTPAdapter, "send", side_effect=stub):
        yield stub


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Each test starts from default settings and a fresh default client.

    Tests run from an empty directory so a developer's ``.env`` is never read.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("GBIF_BASE_URL", "GBIF_USER_NAME", "GBIF_PWD", "GBIF_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    config.reset()
    yield
    config.reset()
