"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.config` - Configuration loading and display
    * :mod:`.console` - Standard output echo
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
