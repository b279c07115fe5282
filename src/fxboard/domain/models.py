# src/fxboard/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Currency quotes and the snapshot produced by one fetch
- Load states observed by the presentation layer
- Display categories and variation direction

Files that USE this module:
- fxboard.adapters.providers.hgbrasil (decodes API responses into snapshots)
- fxboard.adapters.formatting.formatter (returns VariationDirection)
- fxboard.application.finance_store (owns LoadState, filters by CategoryFilter)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from decimal import Decimal  # Exact decimal values for prices and variations
from enum import Enum  # Enumerations for categories and directions
from types import MappingProxyType  # Read-only view over the quotes mapping
from typing import Iterator, Mapping, Optional, Union  # Type hints

# Codes every snapshot must carry, in canonical order
CURRENCY_CODES: tuple[str, ...] = ("USD", "EUR", "GBP", "ARS", "CAD", "AUD", "JPY", "BTC")


@dataclass(frozen=True)
class CurrencyQuote:
    """
    Buy/sell/variation data for one currency code.

    Attributes:
        display_name: Human-readable currency name (e.g. "Dollar")
        buy: Buy price, or None when the API sent null
        sell: Sell price, or None when the API sent null
        variation: Signed fractional change (0.0575 means +5.75%)

    Note:
        A zero buy/sell is kept as Decimal(0) here. Treating it as
        "not available" happens only when formatting.
    """
    display_name: str
    buy: Optional[Decimal]
    sell: Optional[Decimal]
    variation: Decimal

    def __post_init__(self) -> None:
        if not self.display_name:
            raise ValueError("CurrencyQuote.display_name must be non-empty")
        for label, value in (("buy", self.buy), ("sell", self.sell)):
            if value is not None and value < 0:
                raise ValueError(f"CurrencyQuote.{label} must be non-negative, got {value}")


@dataclass(frozen=True)
class CurrencySnapshot:
    """
    One complete, immutable set of currency quotes as of a single fetch.

    Attributes:
        quotes: Mapping of currency code to CurrencyQuote (all CURRENCY_CODES present)
        source: Currency the quotes are priced in, when the API reports it (e.g. "BRL")
    """
    quotes: Mapping[str, CurrencyQuote]
    source: Optional[str] = None

    def __post_init__(self) -> None:
        missing = [code for code in CURRENCY_CODES if code not in self.quotes]
        if missing:
            raise ValueError(f"CurrencySnapshot missing currency codes: {', '.join(missing)}")
        # Freeze a private copy in canonical order
        ordered = {code: self.quotes[code] for code in CURRENCY_CODES}
        object.__setattr__(self, "quotes", MappingProxyType(ordered))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurrencySnapshot):
            return NotImplemented
        return dict(self.quotes) == dict(other.quotes) and self.source == other.source

    def __hash__(self) -> int:
        return hash((tuple(self.quotes.items()), self.source))

    def __iter__(self) -> Iterator[tuple[str, CurrencyQuote]]:
        return iter(self.quotes.items())

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self.quotes)

    def quote(self, code: str) -> CurrencyQuote:
        """
        Get the quote for a currency code.

        Raises:
            KeyError: If the code is not part of the snapshot
        """
        return self.quotes[code.upper()]


class CategoryFilter(Enum):
    """Display categories, each a fixed, ordered subset of currency codes."""
    CRYPTO = "Crypto"
    FIAT = "Fiat"
    CARDS = "Cards"
    SAVINGS = "Savings"

    @property
    def codes(self) -> tuple[str, ...]:
        return CATEGORY_CODES[self]

    @classmethod
    def parse(cls, label: str) -> CategoryFilter:
        """
        Parse a tab label (case-insensitive) into a CategoryFilter.

        Raises:
            ValueError: If the label is not a known category
        """
        needle = label.strip().lower()
        for category in cls:
            if category.value.lower() == needle or category.name.lower() == needle:
                return category
        raise ValueError(f"Unknown category: {label!r}")


CATEGORY_CODES: dict[CategoryFilter, tuple[str, ...]] = {
    CategoryFilter.CRYPTO: ("BTC",),
    CategoryFilter.FIAT: ("USD", "EUR", "GBP", "ARS", "CAD", "AUD", "JPY"),
    CategoryFilter.CARDS: ("USD", "EUR"),
    CategoryFilter.SAVINGS: ("USD", "BTC"),
}


class VariationDirection(Enum):
    """Semantic direction of a variation value."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


# --- Load states -----------------------------------------------------------

@dataclass(frozen=True)
class Idle:
    """Nothing requested yet."""


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True)
class Loaded:
    """The last fetch succeeded."""
    snapshot: CurrencySnapshot


@dataclass(frozen=True)
class Failed:
    """
    The last fetch failed.

    Attributes:
        description: Human-readable error including the underlying cause
        previous_snapshot: Snapshot held before the failed attempt, if any
    """
    description: str
    previous_snapshot: Optional[CurrencySnapshot] = field(default=None)


LoadState = Union[Idle, Loading, Loaded, Failed]
