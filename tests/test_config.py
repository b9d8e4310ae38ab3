"""Tests for process-wide configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from gbif_client import config
from gbif_client.config import DEFAULT_BASE_URL, Settings


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.base_url == DEFAULT_BASE_URL == "https://api.gbif.org/v1"
        assert s.user_name is None
        assert s.pwd is None
        assert s.timeout == 30

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GBIF_BASE_URL", "http://localhost/v1")
        monkeypatch.setenv("GBIF_USER_NAME", "jane")
        monkeypatch.setenv("GBIF_PWD", "secret")
        s = Settings()
        assert s.base_url == "http://localhost/v1"
        assert s.has_credentials

    def test_credentials_need_both(self) -> None:
        assert not Settings(user_name="jane").has_credentials
        assert not Settings(pwd="secret").has_credentials
        assert Settings(user_name="jane", pwd="secret").has_credentials


class TestProcessSettings:
    def test_get_settings_is_cached(self) -> None:
        assert config.get_settings() is config.get_settings()

    def test_configure_overrides(self) -> None:
        updated = config.configure(user_name="jane", pwd="secret")
        assert config.get_settings() is updated
        assert updated.user_name == "jane"
        assert updated.base_url == DEFAULT_BASE_URL

    def test_configure_rejects_unknown(self) -> None:
        with pytest.raises(TypeError):
            config.configure(password="secret")

    def test_reset_rereads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        config.configure(base_url="http://override/v1")
        monkeypatch.setenv("GBIF_BASE_URL", "http://env/v1")
        config.reset()
        assert config.get_settings().base_url == "http://env/v1"

    @pytest.mark.parametrize(
        "overrides",
        [{"timeout": "abc"}, {"base_url": None}, {"timeout": [1, 2]}],
    )
    def test_configure_validates_values(self, overrides: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            config.configure(**overrides)

    def test_failed_configure_keeps_settings(self) -> None:
        before = config.configure(timeout=10)
        with pytest.raises(ValidationError):
            config.configure(timeout="abc")
        assert config.get_settings() is before
        assert config.get_settings().timeout == 10

    def test_configure_coerces_like_environment(self) -> None:
        assert config.configure(timeout="12.5").timeout == 12.5

    def test_configure_ignores_environment_changes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        config.get_settings()
        monkeypatch.setenv("GBIF_BASE_URL", "http://env/v1")
        assert config.configure(user_name="jane").base_url == DEFAULT_BASE_URL


class TestDotEnv:
    """``.env`` is read from the working directory."""

    def test_dotenv_in_working_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("GBIF_BASE_URL=http://dotenv/v1\n")
        assert Settings().base_url == "http://dotenv/v1"

    def test_tests_start_without_dotenv(self, tmp_path: Path) -> None:
        assert Path.cwd().samefile(tmp_path)
        assert not (tmp_path / ".env").exists()
        assert config.get_settings().base_url == DEFAULT_BASE_URL
