# src/fxboard/shared/locale.py
"""
Locale Conventions - Number Separators per Display Locale

This module holds the separator conventions used when rendering numbers
for display. The finance screens show Brazilian Portuguese conventions
(comma as decimal separator, dot for thousands); English conventions are
available for logs and tooling.

Files that USE this module:
- fxboard.adapters.formatting.formatter (separators for amounts and percentages)
- fxboard.config.settings (validates DISPLAY_LOCALE)

Files that this module USES:
- None (pure configuration module)
"""
from __future__ import annotations

from dataclasses import dataclass

# Locale constants
LOCALE_PT_BR = "pt_BR"
LOCALE_EN_US = "en_US"


@dataclass(frozen=True)
class LocaleConventions:
    """Separators used to render a number in one locale."""
    name: str
    decimal_sep: str
    group_sep: str


_CONVENTIONS = {
    LOCALE_PT_BR: LocaleConventions(LOCALE_PT_BR, decimal_sep=",", group_sep="."),
    LOCALE_EN_US: LocaleConventions(LOCALE_EN_US, decimal_sep=".", group_sep=","),
}

SUPPORTED_LOCALES = tuple(_CONVENTIONS)


def get_conventions(name: str) -> LocaleConventions:
    """
    Get the separator conventions for a locale name.

    Accepts both "pt_BR" and "pt-BR" spellings.

    Raises:
        KeyError: If the locale is not supported
    """
    key = name.replace("-", "_")
    if key not in _CONVENTIONS:
        raise KeyError(f"Unsupported locale: {name!r}")
    return _CONVENTIONS[key]


def group_digits(digits: str, sep: str) -> str:
    """
    Insert a group separator every three digits, counting from the right.

    Args:
        digits: String of digits without sign (e.g. '1234567')
        sep: Group separator

    Returns:
        Grouped string (e.g. '1.234.567' for sep='.')
    """
    if not digits.isdigit():
        raise ValueError(f"Expected only digits, got {digits!r}")
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return sep.join(groups)
