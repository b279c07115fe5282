# src/fxboard/application/finance_store.py
"""
Finance Store - Observable Load State for the Currency Screens

This module owns the load/error/success state the presentation layer
observes. It drives the snapshot provider, keeps the last good snapshot
across failures, exposes per-category views of the currency set and
delegates display formatting to the formatter module.

State machine:
    Idle -> Loading -> Loaded | Failed
    Loaded | Failed -> Loading (on reload)

Only one fetch is in flight at a time; a reload requested while loading is
dropped. All transitions run on the event loop thread and replace the state
object in a single assignment, so readers never observe a partial update.

Files that USE this module:
- fxboard.app (runs the initial load and renders categories)
- tests.test_finance_store (unit tests)

Files that this module USES:
- fxboard.adapters.providers.base (SnapshotProvider interface)
- fxboard.adapters.formatting.formatter (amount/variation formatting)
- fxboard.domain (load states, categories, fetch errors)
"""
from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Callable, List, Optional, Tuple, Union

from fxboard.adapters.formatting import formatter
from fxboard.adapters.providers.base import SnapshotProvider
from fxboard.domain.errors import FetchError
from fxboard.domain.models import (
    CategoryFilter,
    CurrencyQuote,
    CurrencySnapshot,
    Failed,
    Idle,
    Loaded,
    Loading,
    LoadState,
    VariationDirection,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[LoadState], None]
Entries = List[Tuple[str, CurrencyQuote]]


def filter_snapshot(
    snapshot: Optional[CurrencySnapshot],
    category: Union[CategoryFilter, str],
) -> Entries:
    """
    Select the quotes of one category, in the category's fixed order.

    Args:
        snapshot: Snapshot to filter (None yields an empty list)
        category: CategoryFilter or its tab label ('Crypto', 'Fiat', ...)

    Returns:
        List of (code, CurrencyQuote) pairs
    """
    if isinstance(category, str):
        category = CategoryFilter.parse(category)
    if snapshot is None:
        return []
    return [(code, snapshot.quotes[code]) for code in category.codes]


class FinanceStore:
    """Manages the currency load state for the presentation layer."""

    def __init__(self, provider: SnapshotProvider, locale: Optional[str] = None):
        """
        Initialize the store in the Idle state. No request is made here;
        call start() or use the store as an async context manager.

        Args:
            provider: Snapshot provider (typically a FinanceClient)
            locale: Display locale for formatting (defaults to settings)
        """
        self.provider = provider
        self.locale = locale
        self._state: LoadState = Idle()
        self._last_snapshot: Optional[CurrencySnapshot] = None
        self._reload_lock = asyncio.Lock()
        self._task: Optional[asyncio.Task] = None
        self._listeners: List[StateListener] = []
        self._closed = False

    # -- lifecycle ---------------------------------------------------------

    async def __aenter__(self) -> FinanceStore:
        self.start()
        # Let the load task run up to its first suspension so the caller
        # sees Loading (or an already settled state) on entry
        await asyncio.sleep(0)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def start(self) -> asyncio.Task:
        """
        Trigger the initial load in the background. The state becomes
        Loading as soon as the event loop runs the task.

        Returns:
            The task running the load
        """
        logger.debug("FinanceStore starting initial load")
        return self.schedule_reload()

    async def close(self) -> None:
        """
        Tear the store down. An in-flight fetch is cancelled and any late
        result is discarded; listeners are dropped.
        """
        self._closed = True
        task = self._task
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._listeners.clear()
        logger.debug("FinanceStore closed")

    @property
    def closed(self) -> bool:
        return self._closed

    # -- observable state -------------------------------------------------

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self._state, Failed):
            return self._state.description
        return None

    @property
    def snapshot(self) -> Optional[CurrencySnapshot]:
        """Last successfully loaded snapshot, whatever the current state."""
        return self._last_snapshot

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a callback invoked with every new state.

        Returns:
            Function that removes the callback
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: LoadState) -> None:
        self._state = state
        logger.debug("FinanceStore state -> %s", type(state).__name__)
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)

    # -- loading ----------------------------------------------------------

    async def reload(self) -> None:
        """
        Fetch a fresh snapshot.

        Returns immediately if a fetch is already in flight or the store is
        closed. Failures end in the Failed state carrying the last good
        snapshot; nothing is raised to the caller.
        """
        if self._closed:
            logger.debug("reload: store is closed, ignoring")
            return

        # Re-entrancy protection: at most one fetch in flight
        if self._reload_lock.locked():
            logger.warning("reload: skipping, a fetch is already in flight")
            return

        async with self._reload_lock:
            previous = self._last_snapshot
            self._set_state(Loading())

            try:
                snapshot = await self.provider.fetch_snapshot()
            except FetchError as e:
                self._apply_failure(e, previous)
                return
            except Exception as e:
                logger.exception("Unexpected error while loading finance data")
                self._apply_failure(e, previous)
                return

            if self._closed:
                logger.debug("reload: store closed while loading, discarding snapshot")
                return

            self._last_snapshot = snapshot
            self._set_state(Loaded(snapshot))
            logger.info("Finance data loaded: %s", ", ".join(snapshot.codes))

    def _apply_failure(self, error: Exception, previous: Optional[CurrencySnapshot]) -> None:
        if self._closed:
            logger.debug("reload: store closed while loading, discarding error %s", error)
            return
        cause = str(error) if isinstance(error, FetchError) else f"{type(error).__name__}: {error}"
        description = f"Failed to load finance data: {cause}"
        logger.warning(description)
        self._set_state(Failed(description, previous))

    def schedule_reload(self) -> asyncio.Task:
        """
        Start a reload in the background without waiting for it.

        Returns:
            The task running the reload, or the task already in flight
        """
        if self._task is not None and not self._task.done():
            return self._task
        self._task = asyncio.get_running_loop().create_task(self.reload())
        return self._task

    async def wait(self) -> LoadState:
        """
        Wait for the background load (if any) to finish.

        Returns:
            The state after the load settles
        """
        task = self._task
        if task is not None and not task.done():
            await asyncio.shield(task)
        return self._state

    # -- derived views ----------------------------------------------------

    def filtered_entries(self, category: Union[CategoryFilter, str]) -> Entries:
        """
        Quotes of one category from the current Loaded snapshot.

        Returns:
            Ordered (code, CurrencyQuote) pairs; empty unless the state is Loaded
        """
        snapshot = self._state.snapshot if isinstance(self._state, Loaded) else None
        return filter_snapshot(snapshot, category)

    def format_amount(self, value) -> str:
        return formatter.format_amount(value, locale=self.locale)

    def format_variation(self, value) -> str:
        return formatter.format_variation(value, locale=self.locale)

    def variation_direction(self, value) -> VariationDirection:
        return formatter.variation_direction(value)

    def variation_color(self, value) -> str:
        return formatter.variation_color(value)
