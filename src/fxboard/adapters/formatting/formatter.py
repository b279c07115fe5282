# src/fxboard/adapters/formatting/formatter.py
"""
Currency Formatter - Display Strings for Prices and Variations

This module turns raw quote fields into the strings and semantic direction
shown on the currency cards: buy/sell amounts in the display currency,
variation percentages, and the positive/negative/neutral classification
the presentation layer maps to colors.

All functions are pure. Rounding uses ROUND_HALF_EVEN on the exact decimal
value, so 5.755 renders as 5,76 and 5.745 as 5,74.

Files that USE this module:
- fxboard.application.finance_store (delegates formatting to these functions)
- fxboard.app (renders currency cards)
- tests.test_formatter (unit tests)

Files that this module USES:
- fxboard.domain.models (VariationDirection)
- fxboard.shared.locale (separator conventions)
- fxboard.config (default locale, currency symbol and NA marker)
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Optional, Union

from fxboard.config import settings
from fxboard.domain.models import VariationDirection
from fxboard.shared.locale import LocaleConventions, get_conventions, group_digits

log = logging.getLogger(__name__)

Number = Union[Decimal, int, float]

_CENTS = Decimal("0.01")

# Presentation colors per direction, as used on the currency cards
DIRECTION_COLORS = {
    VariationDirection.POSITIVE: "green",
    VariationDirection.NEGATIVE: "red",
    VariationDirection.NEUTRAL: "gray",
}


def _to_decimal(value: Number) -> Decimal:
    """Convert to Decimal; floats go through str() to avoid binary artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _conventions(locale: Optional[str]) -> LocaleConventions:
    return get_conventions(locale or settings.display_locale)


def _fmt_fixed2(value: Decimal, conv: LocaleConventions, grouped: bool = True) -> str:
    """
    Render a Decimal with exactly two fraction digits in a locale.

    Raises:
        InvalidOperation: If the value cannot be quantized (NaN, infinity)
    """
    rounded = value.quantize(_CENTS, rounding=ROUND_HALF_EVEN)
    sign = "-" if rounded < 0 else ""
    integer, _, fraction = f"{abs(rounded):f}".partition(".")
    if grouped:
        integer = group_digits(integer, conv.group_sep)
    return f"{sign}{integer}{conv.decimal_sep}{fraction}"


def format_amount(
    value: Optional[Number],
    locale: Optional[str] = None,
    symbol: Optional[str] = None,
    na_marker: Optional[str] = None,
) -> str:
    """
    Format a buy/sell price for display.

    Args:
        value: Price, or None when unavailable
        locale: Display locale (defaults to settings.display_locale)
        symbol: Currency glyph (defaults to settings.currency_symbol)
        na_marker: Marker for unavailable prices (defaults to settings.na_marker)

    Returns:
        'R$ 1.234,56' style string, or the NA marker if value is None,
        not a number, or not positive

    Example:
        format_amount(Decimal("5.75"))  # 'R$ 5,75'
        format_amount(None)             # 'N/A'
    """
    symbol = symbol or settings.currency_symbol
    na_marker = na_marker or settings.na_marker

    if value is None:
        return na_marker

    amount = _to_decimal(value)
    # Zero means "not offered" for these feeds
    if amount.is_nan() or amount <= 0:
        return na_marker

    try:
        return f"{symbol} {_fmt_fixed2(amount, _conventions(locale))}"
    except (InvalidOperation, KeyError, ValueError) as e:
        log.warning("Locale formatting failed for %r, using plain format: %s", value, e)
        return f"{symbol} {amount:.2f}"


def format_variation(value: Number, locale: Optional[str] = None) -> str:
    """
    Format a variation fraction as a percentage with two fraction digits.

    Args:
        value: Signed fraction (0.0575 means +5.75%)
        locale: Display locale (defaults to settings.display_locale)

    Returns:
        '5,75%' style string; negatives keep their sign ('-3,25%')
    """
    fraction = _to_decimal(value)
    percent = fraction * 100

    try:
        return f"{_fmt_fixed2(percent, _conventions(locale), grouped=False)}%"
    except (InvalidOperation, KeyError, ValueError) as e:
        log.warning("Locale formatting failed for variation %r, using plain format: %s", value, e)
        return f"{percent:.2f}%"


def variation_direction(value: Number) -> VariationDirection:
    """
    Classify a variation value.

    Returns:
        POSITIVE iff value > 0, NEGATIVE iff value < 0, otherwise NEUTRAL
    """
    number = _to_decimal(value)
    if number.is_nan():
        return VariationDirection.NEUTRAL
    if number > 0:
        return VariationDirection.POSITIVE
    if number < 0:
        return VariationDirection.NEGATIVE
    return VariationDirection.NEUTRAL


def variation_color(value: Number) -> str:
    """Color name for a variation: 'green', 'red' or 'gray'."""
    return DIRECTION_COLORS[variation_direction(value)]
