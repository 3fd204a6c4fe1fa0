"""Layered configuration for podium-scraping.

The only section the application reads is ``[lib_log_rich]``; everything else
a user drops into the layered files is carried along for ``config`` display.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from podium_scraping import __init__conf__
from podium_scraping.domain.errors import ConfigurationError

DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")
"""Bundled defaults, the lowest layer of every load."""


def validate_profile(profile: str) -> None:
    """Reject profile names that could escape the configuration directories.

    Raises:
        ConfigurationError: Carrying the reason reported by lib_layered_config.

    Examples:
        >>> validate_profile("staging")
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: profile contains invalid characters: ../etc
    """
    try:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration for ``profile``.

    Layers, lowest first: bundled defaults, app, host, user, dotenv, env.
    Each ``(profile, start_dir)`` pair is read once per process.

    Raises:
        ConfigurationError: If ``profile`` is not a usable profile name.
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


def clear_config_cache() -> None:
    """Forget loaded configuration so the next call re-reads every layer."""
    _read_layers.cache_clear()


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "clear_config_cache",
    "get_config",
    "validate_profile",
]
