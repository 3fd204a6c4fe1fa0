"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can report them without
querying the installed distribution at runtime.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used for configuration path resolution.
    * :func:`print_info` - Render the metadata banner.
"""

from __future__ import annotations

from collections.abc import Callable

#: Distribution name as published on the package index.
name = "podium_scraping"
#: One-line project description used as CLI help title.
title = "Podium scraping application scaffold: greeter and application start hook"
#: Release version, kept in sync with ``pyproject.toml``.
version = "0.1.0"
#: Project homepage.
homepage = "https://github.com/podium/podium_scraping"
#: Maintainer name.
author = "Podium"
#: Maintainer contact.
author_email = "dev@podium.com"
#: Console script name.
shell_command = "podium-scraping"

#: Vendor used for macOS/Windows configuration directories.
LAYEREDCONF_VENDOR = "Podium"
#: Application name used for macOS/Windows configuration directories.
LAYEREDCONF_APP = "Podium Scraping"
#: Slug used for XDG configuration directories on Linux.
LAYEREDCONF_SLUG = "podium-scraping"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Print the package metadata banner.

    Args:
        writer: Optional callable receiving the rendered banner. Defaults to
            :func:`print` without an extra trailing newline.

    Example:
        >>> lines: list[str] = []
        >>> print_info(writer=lines.append)
        >>> "podium_scraping" in lines[0]
        True
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    banner = "\n".join(lines) + "\n"
    if writer is None:
        print(banner, end="")
    else:
        writer(banner)


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
