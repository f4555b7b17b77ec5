"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HyprdynSettings(BaseSettings):
    """hyprdyn settings.

    Own fields are read from ``HYPRDYN_*`` variables, e.g.
    ``HYPRDYN_LOG_LEVEL=DEBUG`` maps to ``log_level``.  The compositor's
    variables (``HYPRLAND_INSTANCE_SIGNATURE``, ``XDG_RUNTIME_DIR``) are read
    under their own names since Hyprland exports them to every client.
    """

    model_config = SettingsConfigDict(
        env_prefix="HYPRDYN_",
        case_sensitive=False,
        populate_by_name=True,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "WARNING"

    # -- IPC -------------------------------------------------------------------
    socket_path: str | None = None
    """Explicit path to Hyprland's request socket.  Skips discovery when set."""

    ipc_timeout: float = 5.0
    """Seconds to wait on a single socket request before failing."""

    instance_signature: str | None = Field(default=None, validation_alias="HYPRLAND_INSTANCE_SIGNATURE")
    runtime_dir: str | None = Field(default=None, validation_alias="XDG_RUNTIME_DIR")


def get_settings() -> HyprdynSettings:
    """Return a cached settings instance.

    Call ``_get_settings_cached.cache_clear()`` in tests to force a re-read
    after overriding env vars.
    """
    return _get_settings_cached()


def _get_settings_cached() -> HyprdynSettings:
    """Inner function wrapped by lru_cache (allows type-safe cache_clear)."""
    return HyprdynSettings()


from functools import lru_cache  # noqa: E402

_get_settings_cached = lru_cache(maxsize=1)(_get_settings_cached)
