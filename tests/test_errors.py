"""Tests for status-code error mapping."""

from __future__ import annotations

import pytest
import requests

from gbif_client import errors


def _response(status: int, text: str = "") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = {200: "OK", 400: "Bad Request", 404: "Not Found"}.get(status, "")
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = "https://api.gbif.org/v1/species/match"
    return resp


class TestRaiseForStatus:
    """Non-2xx responses become typed errors."""

    @pytest.mark.parametrize(
        ("status", "error_cls"),
        [
            (400, errors.BadRequest),
            (404, errors.NotFound),
            (500, errors.InternalServerError),
            (502, errors.BadGateway),
            (503, errors.ServiceUnavailable),
            (504, errors.GatewayTimeout),
        ],
    )
    def test_mapped_statuses(self, status: int, error_cls: type[errors.HTTPError]) -> None:
        with pytest.raises(error_cls) as excinfo:
            errors.raise_for_status(_response(status, "boom"))
        assert excinfo.value.status_code == status

    def test_success_does_not_raise(self) -> None:
        errors.raise_for_status(_response(200, "{}"))

    def test_unmapped_status_is_plain_http_error(self) -> None:
        with pytest.raises(errors.HTTPError) as excinfo:
            errors.raise_for_status(_response(429, "slow down"))
        assert type(excinfo.value) is errors.HTTPError
        assert excinfo.value.status_code == 429

    def test_body_carried(self) -> None:
        with pytest.raises(errors.BadRequest) as excinfo:
            errors.raise_for_status(_response(400, "Invalid rank"))
        assert excinfo.value.body == "Invalid rank"
        assert str(excinfo.value) == "Invalid rank"
        assert excinfo.value.url.endswith("/species/match")

    def test_empty_body_uses_reason(self) -> None:
        with pytest.raises(errors.NotFound) as excinfo:
            errors.raise_for_status(_response(404))
        assert str(excinfo.value) == "404 Not Found"

    def test_all_errors_share_base(self) -> None:
        for cls in errors.STATUS_ERRORS.values():
            assert issubclass(cls, errors.GbifError)
