# src/fxboard/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Locale conventions
- Logging configuration
"""

from fxboard.shared.validators import (
    validate_api_key,
    validate_base_url,
)
from fxboard.shared.locale import (
    get_conventions,
    group_digits,
    LocaleConventions,
    LOCALE_EN_US,
    LOCALE_PT_BR,
    SUPPORTED_LOCALES,
)

__all__ = [
    "validate_api_key",
    "validate_base_url",
    "get_conventions",
    "group_digits",
    "LocaleConventions",
    "LOCALE_EN_US",
    "LOCALE_PT_BR",
    "SUPPORTED_LOCALES",
]
