"""Console script entry point with production wiring.

Lives at package level, outside the adapters, so it may import the
composition root without breaking layer contracts.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``podium-scraping`` console script and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
