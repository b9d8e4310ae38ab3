"""
Process-wide configuration.

Settings are read from ``GBIF_*`` environment variables (or a ``.env`` file)
and can be overridden at runtime with :func:`configure`::

    from gbif_client import config

    config.configure(user_name="jane", pwd="secret")
    config.get_settings().base_url  # "https://api.gbif.org/v1"

A :class:`~gbif_client.request.Client` holds its own ``Settings`` instance, so
tests can build isolated clients without touching the process default.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.gbif.org/v1"
DEFAULT_TIMEOUT = 30  # seconds


class Settings(BaseSettings):
    """Connection settings for the GBIF API."""

    model_config = SettingsConfigDict(
        env_prefix="GBIF_",
        env_file=".env",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root")
    user_name: str | None = Field(default=None, description="GBIF account name")
    pwd: str | None = Field(default=None, description="GBIF account password")
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Default read timeout in seconds")

    @property
    def has_credentials(self) -> bool:
        """True when both user name and password are configured."""
        return bool(self.user_name) and bool(self.pwd)


# ---------------------------------------------------------------------------
# Process default (module-level state)
# ---------------------------------------------------------------------------
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(**overrides: Any) -> Settings:
    """
    Replace the process-wide settings with ``overrides`` applied.

    Must not be called while requests are in flight. The default client is
    dropped so the next module-level call picks the new values up.

    Args:
        **overrides: Any ``Settings`` field (``base_url``, ``user_name``, ``pwd``, ``timeout``).

    Returns:
        The new settings instance.

    Raises:
        TypeError: An override names no ``Settings`` field.
        pydantic.ValidationError: An override has an invalid value.
    """
    global _settings  # noqa: PLW0603
    unknown = set(overrides) - set(Settings.model_fields)
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    _settings = Settings.model_validate({**get_settings().model_dump(), **overrides})
    _drop_default_client()
    return _settings


def reset() -> None:
    """Discard runtime overrides; the environment is re-read on next access."""
    global _settings  # noqa: PLW0603
    _settings = None
    _drop_default_client()


def _drop_default_client() -> None:
    # Imported here: request imports this module at load time.
    from gbif_client import request

    request.reset_default_client()
