# src/fxboard/adapters/providers/hgbrasil.py
"""
HG Brasil Finance API Client for Currency Snapshots

This module implements the client for the HG Brasil finance endpoint. One call
issues one HTTP GET, validates the response and decodes it into a
CurrencySnapshot. Every failure is raised as a typed FetchError; there are no
retries and no caches.

Files that USE this module:
- fxboard.application.finance_store (FinanceStore awaits fetch_snapshot)
- fxboard.app (builds the client from settings)
- tests.test_providers (unit tests)

Files that this module USES:
- fxboard.adapters.providers.base (SnapshotProvider interface)
- fxboard.adapters.providers.schemas (wire schema for one currency entry)
- fxboard.domain (CurrencySnapshot, CurrencyQuote, fetch errors)
- fxboard.config (settings for API configuration)
"""
from __future__ import annotations

import asyncio
import logging
from decimal import Decimal
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from fxboard.adapters.providers.base import SnapshotProvider
from fxboard.adapters.providers.schemas import CurrencyPayload
from fxboard.config import settings
from fxboard.domain.errors import (
    BadStatusError,
    DecodeError,
    InvalidRequestError,
    TransportError,
)
from fxboard.domain.models import CURRENCY_CODES, CurrencyQuote, CurrencySnapshot
from fxboard.shared.validators import validate_api_key, validate_base_url

log = logging.getLogger(__name__)


def _unwrap_currencies(document: Any) -> Dict[str, Any]:
    """
    Locate the 'currencies' object in a response document.

    With fields=only_results the API returns it at the top level; the full
    response nests it under 'results'.
    """
    if not isinstance(document, dict):
        raise DecodeError(f"expected a JSON object, got {type(document).__name__}")

    container = document
    if "currencies" not in container and isinstance(container.get("results"), dict):
        container = container["results"]

    currencies = container.get("currencies")
    if currencies is None:
        raise DecodeError("response missing 'currencies' field")
    if not isinstance(currencies, dict):
        raise DecodeError(f"'currencies' must be an object, got {type(currencies).__name__}")
    return currencies


def decode_snapshot(document: Any) -> CurrencySnapshot:
    """
    Decode a finance response document into a CurrencySnapshot.

    All eight currency codes must be present, each with a non-empty 'name'
    and a numeric 'variation'. 'buy' and 'sell' may be missing or null.

    Args:
        document: Parsed JSON document (numbers ideally parsed as Decimal)

    Returns:
        CurrencySnapshot with one quote per code

    Raises:
        DecodeError: If the document does not match the schema
    """
    currencies = _unwrap_currencies(document)

    missing = [code for code in CURRENCY_CODES if code not in currencies]
    if missing:
        raise DecodeError(f"missing currency codes: {', '.join(missing)}")

    quotes: Dict[str, CurrencyQuote] = {}
    for code in CURRENCY_CODES:
        try:
            payload = CurrencyPayload.model_validate(currencies[code])
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'value'}: {err['msg']}"
                for err in e.errors()
            )
            raise DecodeError(f"invalid entry for {code}: {errors}") from e
        quotes[code] = payload.to_quote()

    source = currencies.get("source")
    if not isinstance(source, str):
        source = None

    return CurrencySnapshot(quotes=quotes, source=source)


class FinanceClient(SnapshotProvider):
    """
    HG Brasil finance API client.

    The API returns a JSON object with one entry per currency code. We keep
    the eight codes the screens display and decode them into a snapshot.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize the finance API client.

        Args:
            base_url: Optional endpoint URL (defaults to settings.finance_base_url)
            api_key: Optional API key (defaults to settings.finance_api_key)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.base_url = base_url if base_url is not None else settings.finance_base_url
        self.api_key = api_key if api_key is not None else settings.finance_api_key
        self.timeout = timeout or settings.http_timeout_seconds

    def build_params(self) -> Dict[str, str]:
        """
        Build the query parameters for the finance request.

        Returns:
            Dict with array_limit, fields and key

        Raises:
            InvalidRequestError: If the base URL or API key is unusable
        """
        if not validate_base_url(self.base_url):
            raise InvalidRequestError(f"invalid base URL {self.base_url!r}")
        if not validate_api_key(self.api_key):
            raise InvalidRequestError("API key is empty or malformed")
        return {
            "array_limit": "1",
            "fields": "only_results,currencies",
            "key": self.api_key,
        }

    def get_latest_raw(self) -> Dict[str, Any]:
        """
        Get the raw JSON document from the finance API.

        Numbers in the body are parsed as Decimal.

        Returns:
            Parsed JSON document

        Raises:
            InvalidRequestError: If the request cannot be built
            TransportError: On network failure or timeout
            BadStatusError: If the HTTP status is not 200
            DecodeError: If the body is not valid JSON
        """
        params = self.build_params()

        try:
            log.info("Fetching currency snapshot from %s", self.base_url)
            resp = requests.get(
                self.base_url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as e:
            log.error("Finance API request could not be built: %s", e)
            raise InvalidRequestError(str(e)) from e
        except requests.exceptions.Timeout as e:
            log.warning("Finance API timeout after %d seconds", self.timeout)
            raise TransportError(f"timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            log.warning("Finance API request failed: %s", e)
            raise TransportError(str(e)) from e

        if resp.status_code != 200:
            log.warning("Finance API returned HTTP %d", resp.status_code)
            raise BadStatusError(resp.status_code, resp.reason or None)

        try:
            return resp.json(parse_float=Decimal)
        except ValueError as e:
            log.error("Finance API returned invalid JSON: %s", e)
            raise DecodeError(f"invalid JSON: {e}") from e

    def fetch_snapshot_sync(self) -> CurrencySnapshot:
        """
        Fetch and decode one snapshot, blocking the calling thread.

        Raises:
            FetchError: Any of its subclasses, see get_latest_raw and decode_snapshot
        """
        document = self.get_latest_raw()
        try:
            snapshot = decode_snapshot(document)
        except DecodeError as e:
            log.error("Finance API schema mismatch: %s", e.details)
            raise
        log.info("Finance API snapshot decoded: %d currencies", len(snapshot.quotes))
        return snapshot

    async def fetch_snapshot(self) -> CurrencySnapshot:
        """
        Fetch and decode one snapshot without blocking the event loop.

        Returns:
            Decoded CurrencySnapshot

        Raises:
            FetchError: InvalidRequestError, TransportError, BadStatusError or DecodeError
        """
        return await asyncio.to_thread(self.fetch_snapshot_sync)
