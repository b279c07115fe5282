# src/fxboard/adapters/formatting/__init__.py
"""
Formatting Adapters - Display Formatting

This package contains the formatting functions for prices and variations
shown on the currency cards.
"""

from fxboard.adapters.formatting.formatter import (
    DIRECTION_COLORS,
    format_amount,
    format_variation,
    variation_color,
    variation_direction,
)

__all__ = [
    "DIRECTION_COLORS",
    "format_amount",
    "format_variation",
    "variation_color",
    "variation_direction",
]
