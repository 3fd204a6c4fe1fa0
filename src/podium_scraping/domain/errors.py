"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration profile name is rejected or configuration
    values are malformed. Caught at the CLI boundary and mapped to
    ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from podium_scraping.domain.errors import ConfigurationError
        >>> err = ConfigurationError("profile contains invalid characters: ../etc")
        >>> str(err)
        'profile contains invalid characters: ../etc'
    """


__all__ = ["ConfigurationError"]
