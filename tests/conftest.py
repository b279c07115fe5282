# tests/conftest.py
"""
Shared Test Fixtures

Provides a well-formed finance API body, a decoded snapshot built from it,
a helper to build real requests.Response objects, and an in-memory
snapshot provider for store tests.

Files that USE this module:
- pytest (fixtures are injected into every test module)

Files that this module USES:
- fxboard.adapters.providers (SnapshotProvider, decode_snapshot)
- requests (Response objects for mocked HTTP calls)
"""
import asyncio  # Yield to the event loop inside the fake provider
import copy  # Deep copies so tests can mutate bodies freely
import json  # Encode bodies and parse them with Decimal numbers
from decimal import Decimal  # Exact numbers in decoded fixtures

import pytest  # Testing framework for writing and running tests
import requests  # HTTP library (Response objects for mocking)

from fxboard.adapters.providers import SnapshotProvider, decode_snapshot  # Provider interface and decoder


FINANCE_BODY = {
    "currencies": {
        "source": "BRL",
        "USD": {"name": "Dollar", "buy": 5.4321, "sell": 5.4335, "variation": 0.0575},
        "EUR": {"name": "Euro", "buy": 6.1012, "sell": 6.1034, "variation": -0.0325},
        "GBP": {"name": "Pound Sterling", "buy": None, "sell": None, "variation": 0},
        "ARS": {"name": "Argentine Peso", "sell": None, "variation": -1.2},
        "CAD": {"name": "Canadian Dollar", "buy": 3.9051, "sell": 0, "variation": 0.12},
        "AUD": {"name": "Australian Dollar", "buy": 3.5512, "sell": None, "variation": 0.41},
        "JPY": {"name": "Japanese Yen", "buy": 0.0362, "sell": None, "variation": -0.2},
        "BTC": {"name": "Bitcoin", "buy": 350123.45, "sell": 350123.45, "variation": 1.234},
    }
}


class FakeProvider(SnapshotProvider):
    """Returns (or raises) queued results in order, counting calls."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0
        self.gate = None  # optional asyncio.Event that must be set before returning

    async def fetch_snapshot(self):
        self.calls += 1
        await asyncio.sleep(0)
        if self.gate is not None:
            await self.gate.wait()
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


def make_response(status_code=200, body=None, reason="OK"):
    """Build a real requests.Response with a JSON (or raw text) body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.encoding = "utf-8"
    if body is None:
        text = ""
    elif isinstance(body, str):
        text = body
    else:
        text = json.dumps(body)
    resp._content = text.encode("utf-8")
    return resp


@pytest.fixture
def finance_body():
    return copy.deepcopy(FINANCE_BODY)


@pytest.fixture
def snapshot():
    document = json.loads(json.dumps(FINANCE_BODY), parse_float=Decimal)
    return decode_snapshot(document)


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def provider_factory():
    return FakeProvider
