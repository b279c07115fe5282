# src/fxboard/adapters/providers/schemas.py
"""
Finance API Wire Schema

Pydantic model for one entry of the 'currencies' object returned by the
finance endpoint. The model only validates; conversion to the domain
CurrencyQuote happens in to_quote().

Files that USE this module:
- fxboard.adapters.providers.hgbrasil (decode_snapshot validates each entry)

Files that this module USES:
- fxboard.domain.models (CurrencyQuote)
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fxboard.domain.models import CurrencyQuote


class CurrencyPayload(BaseModel):
    """
    One currency entry as sent by the API.

    Example:
        {"name": "Dollar", "buy": 5.1234, "sell": 5.1301, "variation": -0.294}
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(min_length=1, strict=True)
    buy: Optional[Decimal] = Field(default=None, ge=0)
    sell: Optional[Decimal] = Field(default=None, ge=0)
    variation: Decimal

    @field_validator("buy", "sell", "variation", mode="before")
    @classmethod
    def require_json_number(cls, v: Any) -> Any:
        """Reject strings and booleans; the API sends prices as JSON numbers."""
        if v is None or isinstance(v, (Decimal, float)):
            return v
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        raise ValueError(f"expected a number, got {type(v).__name__}")

    def to_quote(self) -> CurrencyQuote:
        return CurrencyQuote(
            display_name=self.name,
            buy=self.buy,
            sell=self.sell,
            variation=self.variation,
        )
