# src/fxboard/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

This module provides validation functions for configuration values.
It validates API keys and endpoint URLs to catch invalid
configuration before any request is built.

Files that USE this module:
- fxboard.config.settings (uses validation functions in Settings field validators)
- fxboard.adapters.providers.hgbrasil (validates the URL before each request)

Files that this module USES:
- None (pure utility functions)
"""
import re
import urllib.parse


def validate_api_key(api_key: str, min_length: int = 6) -> bool:
    """
    Validate API key format.

    Args:
        api_key: API key to validate
        min_length: Minimum length requirement

    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False

    # HG Brasil keys are short alphanumeric tokens
    return len(api_key) >= min_length and bool(re.match(r'^[A-Za-z0-9_-]+$', api_key))


def validate_base_url(url: str) -> bool:
    """
    Validate that a URL is an absolute http(s) URL.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url or url != url.strip():
        return False

    try:
        parsed = urllib.parse.urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)

