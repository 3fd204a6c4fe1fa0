"""Configuration adapter: layered loading and display via lib_layered_config.

Contents:
    * :mod:`.loader` - Cached layered loading with profile validation
    * :mod:`.display` - Configuration display in human/JSON formats
"""

from __future__ import annotations

from .display import display_config
from .loader import clear_config_cache, get_config

__all__ = [
    "clear_config_cache",
    "display_config",
    "get_config",
]
