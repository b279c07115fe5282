# src/fxboard/adapters/providers/base.py
"""
Base Provider Interface for Currency Snapshot Providers

This module defines the abstract base class for snapshot providers.
It establishes the contract the finance store depends on, so tests and
alternative endpoints can be injected in place of the HTTP client.

Files that USE this module:
- fxboard.adapters.providers.hgbrasil (FinanceClient implements SnapshotProvider)
- fxboard.application.finance_store (depends on SnapshotProvider)

Files that this module USES:
- fxboard.domain.models (CurrencySnapshot)
"""
from abc import ABC, abstractmethod

from fxboard.domain.models import CurrencySnapshot


class SnapshotProvider(ABC):
    @abstractmethod
    async def fetch_snapshot(self) -> CurrencySnapshot:
        """Return one decoded snapshot or raise FetchError."""
        raise NotImplementedError
