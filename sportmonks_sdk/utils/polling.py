"""Polling helpers for near-real-time data (livescores, transfers).

A Poller calls a fetch coroutine immediately and then every ``interval``
seconds, and reports data through ``on_data`` only when it changed:

    poller = create_livescores_poller(
        lambda: client.livescores.inplay().include(["scores"]).get(),
        on_data=print,
    )
    poller.start()
    ...
    poller.stop()
"""

import asyncio
import inspect
import json
import logging
import time
from typing import Any, Awaitable, Callable, Optional

from sportmonks_sdk.domain.models.response import PaginatedResponse

logger = logging.getLogger(__name__)

DEFAULT_LIVESCORES_INTERVAL_S = 10.0
DEFAULT_TRANSFERS_INTERVAL_S = 60.0

FetchFunc = Callable[[], Awaitable[Any]]
CompareFunc = Callable[[Any, Any], bool]


# --- Payload helpers ---

def _payload_data(payload: Any) -> Any:
    if isinstance(payload, dict):
        return payload.get("data")
    return getattr(payload, "data", payload)


def _is_paginated(payload: Any) -> bool:
    if isinstance(payload, dict):
        return "pagination" in payload
    return isinstance(payload, PaginatedResponse)


def _ids(items: Any) -> set:
    if not isinstance(items, list):
        return set()
    return {item.get("id") for item in items if isinstance(item, dict)}


def _dump(payload: Any) -> str:
    raw = getattr(payload, "raw", None)
    return json.dumps(raw if raw else payload, sort_keys=True, default=str)


def has_changed(old: Any, new: Any) -> bool:
    """Default change detection.

    Paginated payloads compare the set of entity ids in ``data``; everything
    else compares a canonical JSON dump.
    """
    if _is_paginated(old) and _is_paginated(new):
        return _ids(_payload_data(old)) != _ids(_payload_data(new))
    return _dump(old) != _dump(new)


def transfers_changed(old: Any, new: Any) -> bool:
    """Transfer feeds change when the newest date moves or the id set changes."""
    old_items = _payload_data(old) or []
    new_items = _payload_data(new) or []

    def latest(items: Any) -> str:
        dates = [str(item.get("date")) for item in items if isinstance(item, dict) and item.get("date")]
        return max(dates) if dates else ""

    return latest(old_items) != latest(new_items) or _ids(old_items) != _ids(new_items)


async def _maybe_await(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


class Poller:
    """Repeatedly fetches data and reports changes."""

    def __init__(
        self,
        fetch: FetchFunc,
        interval: float,
        max_duration: Optional[float] = None,
        on_data: Optional[Callable[[Any], Any]] = None,
        on_error: Optional[Callable[[Exception], Any]] = None,
        stop_on_error: bool = False,
        compare: Optional[CompareFunc] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initializes the poller.

        Args:
            fetch: Zero-argument coroutine function returning the payload.
            interval: Seconds between fetches.
            max_duration: Optional total polling time in seconds.
            on_data: Called (or awaited) with the first payload and each changed one.
            on_error: Called (or awaited) with any exception raised by fetch.
            stop_on_error: Stop polling after the first failed fetch.
            compare: ``compare(old, new) -> bool`` returning True on change.
        """
        if interval <= 0:
            raise ValueError("Polling interval must be positive")
        self.fetch = fetch
        self.interval = interval
        self.max_duration = max_duration
        self.on_data = on_data
        self.on_error = on_error
        self.stop_on_error = stop_on_error
        self.compare = compare or has_changed
        self._sleep = sleep
        self._clock = clock
        self._active = False
        self._task: Optional[asyncio.Task] = None
        self._last: Any = None
        self._has_last = False

    def is_active(self) -> bool:
        return self._active

    @property
    def last_data(self) -> Any:
        return self._last

    def start(self) -> asyncio.Task:
        """Schedules run() on the running event loop.

        Raises:
            RuntimeError: If the poller is already active.
        """
        if self._active:
            raise RuntimeError("Polling is already active")
        self._active = True
        self._task = asyncio.ensure_future(self.run())
        return self._task

    def stop(self) -> None:
        self._active = False
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        logger.debug("Polling stopped")

    async def run(self) -> None:
        """The polling loop: fetch immediately, then every ``interval`` seconds."""
        self._active = True
        started = self._clock()
        try:
            while self._active:
                await self._poll_once()
                if not self._active or self._expired(started):
                    break
                await self._sleep(self.interval)
                if self._expired(started):
                    break
        finally:
            self._active = False

    def _expired(self, started: float) -> bool:
        return self.max_duration is not None and self._clock() - started >= self.max_duration

    async def _poll_once(self) -> None:
        try:
            data = await self.fetch()
        except Exception as e:
            if self.on_error:
                await _maybe_await(self.on_error(e))
            else:
                logger.error(f"Polling fetch failed: {e}")
            if self.stop_on_error:
                self._active = False
            return

        changed = not self._has_last or self.compare(self._last, data)
        self._last = data
        self._has_last = True
        if changed and self.on_data:
            await _maybe_await(self.on_data(data))


def create_livescores_poller(fetch: FetchFunc, interval: float = DEFAULT_LIVESCORES_INTERVAL_S, **kwargs) -> Poller:
    """Poller preset for livescores (10 second interval)."""
    return Poller(fetch, interval=interval, **kwargs)


def create_transfers_poller(fetch: FetchFunc, interval: float = DEFAULT_TRANSFERS_INTERVAL_S, **kwargs) -> Poller:
    """Poller preset for transfers (60 second interval, date/id based change detection)."""
    kwargs.setdefault("compare", transfers_changed)
    return Poller(fetch, interval=interval, **kwargs)
