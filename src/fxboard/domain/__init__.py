# src/fxboard/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from fxboard.domain.models import (
    CATEGORY_CODES,
    CURRENCY_CODES,
    CategoryFilter,
    CurrencyQuote,
    CurrencySnapshot,
    Failed,
    Idle,
    Loaded,
    Loading,
    LoadState,
    VariationDirection,
)
from fxboard.domain.errors import (
    BadStatusError,
    DecodeError,
    DomainError,
    FetchError,
    InvalidRequestError,
    TransportError,
)

__all__ = [
    "CURRENCY_CODES",
    "CATEGORY_CODES",
    "CurrencyQuote",
    "CurrencySnapshot",
    "CategoryFilter",
    "VariationDirection",
    "LoadState",
    "Idle",
    "Loading",
    "Loaded",
    "Failed",
    "DomainError",
    "FetchError",
    "InvalidRequestError",
    "TransportError",
    "BadStatusError",
    "DecodeError",
]
