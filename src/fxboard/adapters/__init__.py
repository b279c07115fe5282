# src/fxboard/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (finance API client)
- Formatting (display output)
"""

__all__ = []
