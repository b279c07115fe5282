# src/fxboard/app.py
"""
Application Entry Point - Composition Root and Command Line

This module wires the finance client, the finance store and logging, runs
one load and prints the currency cards of the requested categories.

Files that USE this module:
- fxboard.__main__ (python -m fxboard)
- the fxboard console script

Files that this module USES:
- fxboard.shared.logging_conf (setup_logging for logging configuration)
- fxboard.config (settings for configuration management)
- fxboard.adapters.providers.hgbrasil (FinanceClient)
- fxboard.application.finance_store (FinanceStore)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command line parsing
import asyncio  # Event loop for the async store
import logging  # Standard library for logging messages and errors
import sys  # Exit codes and output streams
from typing import List, Optional, Sequence  # Type hints

from fxboard.adapters.providers.base import SnapshotProvider  # Provider interface
from fxboard.adapters.providers.hgbrasil import FinanceClient  # HG Brasil API client
from fxboard.application.finance_store import FinanceStore  # Observable load state
from fxboard.config import settings  # Application configuration and settings
from fxboard.domain.models import CategoryFilter, Failed, Loaded, VariationDirection  # Domain types
from fxboard.shared.logging_conf import setup_logging  # Configure logging with file rotation

logger = logging.getLogger(__name__)

_ARROWS = {
    VariationDirection.POSITIVE: "📈",
    VariationDirection.NEGATIVE: "📉",
    VariationDirection.NEUTRAL: "⏸",
}


def render_category(store: FinanceStore, category: CategoryFilter) -> List[str]:
    """
    Render the currency cards of one category as plain text lines.

    Args:
        store: Loaded finance store
        category: Category to render

    Returns:
        Header line followed by one line per currency
    """
    lines = [f"[{category.value}]"]
    for code, quote in store.filtered_entries(category):
        arrow = _ARROWS[store.variation_direction(quote.variation)]
        lines.append(
            f"{code} {quote.display_name}: "
            f"buy {store.format_amount(quote.buy)} | "
            f"sell {store.format_amount(quote.sell)} | "
            f"{store.format_variation(quote.variation)} {arrow}"
        )
    return lines


async def run(categories: Sequence[CategoryFilter], provider: SnapshotProvider,
              locale: Optional[str] = None) -> int:
    """
    Load one snapshot and print the requested categories.

    Returns:
        Process exit code (0 when loaded, 1 when the load failed)
    """
    async with FinanceStore(provider, locale=locale) as store:
        state = await store.wait()

        if isinstance(state, Failed):
            print(state.description, file=sys.stderr)
            return 1
        if not isinstance(state, Loaded):
            logger.error("Finance store settled in unexpected state: %s", state)
            return 1

        if state.snapshot.source:
            print(f"Quotes in {state.snapshot.source}")
        for category in categories:
            print("\n".join(render_category(store, category)))
        return 0


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fxboard",
        description="Show currency quotes from the HG Brasil finance API.",
    )
    parser.add_argument(
        "-c", "--category",
        type=CategoryFilter.parse,
        default=CategoryFilter.FIAT,
        help="Category to show: Crypto, Fiat, Cards or Savings (default: Fiat)",
    )
    parser.add_argument("--all", action="store_true", help="Show every category")
    parser.add_argument("--locale", default=None, help="Display locale (pt_BR or en_US)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Configure logging, build the client and run one load.

    Returns:
        Process exit code
    """
    args = _parse_args(argv)

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    categories = list(CategoryFilter) if args.all else [args.category]
    client = FinanceClient(
        base_url=settings.finance_base_url,
        api_key=settings.finance_api_key,
        timeout=settings.http_timeout_seconds,
    )
    try:
        return asyncio.run(run(categories, client, locale=args.locale))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
