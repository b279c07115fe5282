# src/fxboard/__init__.py
"""
FXBoard - Currency Quotes from the HG Brasil Finance API

Fetches a snapshot of currency quotes (USD, EUR, GBP, ARS, CAD, AUD, JPY,
BTC), exposes it through an observable load state with per-category views,
and formats prices and variations for Brazilian Portuguese display.
"""

__version__ = "1.0.0"
