# tests/test_app.py
"""
Application Tests - Unit Tests for the Command Line Entry Point

This module contains unit tests for the composition root: rendering of
currency cards, the run coroutine's exit codes, and argument handling in
main().

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxboard.app (render_category, run, main)
- unittest.mock (patch for client and logging setup)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests
from unittest.mock import patch  # Patching the client and logging for main()

from fxboard.app import main, render_category, run  # Entry points to test
from fxboard.application.finance_store import FinanceStore  # Store used for rendering
from fxboard.domain.errors import BadStatusError  # Failure to inject
from fxboard.domain.models import CategoryFilter  # Categories to render


class TestRenderCategory:
    @pytest.mark.asyncio
    async def test_render_fiat(self, provider_factory, snapshot):
        store = FinanceStore(provider_factory(snapshot))
        await store.reload()

        lines = render_category(store, CategoryFilter.CARDS)

        assert lines == [
            "[Cards]",
            "USD Dollar: buy R$ 5,43 | sell R$ 5,43 | 5,75% 📈",
            "EUR Euro: buy R$ 6,10 | sell R$ 6,10 | -3,25% 📉",
        ]

    @pytest.mark.asyncio
    async def test_render_unavailable_prices(self, provider_factory, snapshot):
        store = FinanceStore(provider_factory(snapshot))
        await store.reload()

        lines = render_category(store, CategoryFilter.FIAT)

        assert "GBP Pound Sterling: buy N/A | sell N/A | 0,00% ⏸" in lines
        # zero sell price is shown as unavailable
        assert "CAD Canadian Dollar: buy R$ 3,91 | sell N/A | 12,00% 📈" in lines

    def test_render_before_load(self, provider_factory):
        store = FinanceStore(provider_factory())
        assert render_category(store, CategoryFilter.CRYPTO) == ["[Crypto]"]


class TestRun:
    @pytest.mark.asyncio
    async def test_loaded_exit_code(self, provider_factory, snapshot, capsys):
        code = await run([CategoryFilter.CRYPTO], provider_factory(snapshot))

        out = capsys.readouterr().out
        assert code == 0
        assert "Quotes in BRL" in out
        assert "BTC Bitcoin: buy R$ 350.123,45" in out

    @pytest.mark.asyncio
    async def test_failed_exit_code(self, provider_factory, capsys):
        code = await run([CategoryFilter.FIAT], provider_factory(BadStatusError(503)))

        err = capsys.readouterr().err
        assert code == 1
        assert "Failed to load finance data: bad status: HTTP 503" in err


class TestMain:
    @patch('fxboard.app.setup_logging')
    @patch('fxboard.app.FinanceClient')
    def test_main_all_categories(self, mock_client_cls, mock_setup_logging,
                                 provider_factory, snapshot, capsys):
        mock_client_cls.return_value = provider_factory(snapshot)

        code = main(["--all"])

        out = capsys.readouterr().out
        assert code == 0
        for label in ("[Crypto]", "[Fiat]", "[Cards]", "[Savings]"):
            assert label in out
        mock_setup_logging.assert_called_once()
        mock_client_cls.assert_called_once_with(
            base_url="https://api.hgbrasil.com/finance",
            api_key="d79425ba",
            timeout=10,
        )

    @patch('fxboard.app.setup_logging')
    @patch('fxboard.app.FinanceClient')
    def test_main_category_and_locale(self, mock_client_cls, mock_setup_logging,
                                      provider_factory, snapshot, capsys):
        mock_client_cls.return_value = provider_factory(snapshot)

        code = main(["--category", "savings", "--locale", "en_US"])

        out = capsys.readouterr().out
        assert code == 0
        assert "[Savings]" in out
        assert "BTC Bitcoin: buy R$ 350,123.45" in out
        assert "[Fiat]" not in out

    def test_main_rejects_unknown_category(self):
        with pytest.raises(SystemExit):
            main(["--category", "stocks"])
