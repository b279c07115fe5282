# src/fxboard/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains the adapter for the HG Brasil finance API.
Providers implement the SnapshotProvider interface.
"""

from fxboard.adapters.providers.base import SnapshotProvider
from fxboard.adapters.providers.hgbrasil import FinanceClient, decode_snapshot

__all__ = [
    "SnapshotProvider",
    "FinanceClient",
    "decode_snapshot",
]
