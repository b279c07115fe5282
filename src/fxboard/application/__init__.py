# src/fxboard/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the finance store that orchestrates the snapshot
provider and exposes observable load state. No direct I/O dependencies;
it uses adapters through interfaces.
"""

from fxboard.application.finance_store import FinanceStore, filter_snapshot

__all__ = [
    "FinanceStore",
    "filter_snapshot",
]
