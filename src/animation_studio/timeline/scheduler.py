"""Per-refresh callback schedulers that drive timeline playback."""

import itertools
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable

from ..constants import FRAME_DURATION_MS

TickCallback = Callable[[float], None]


@dataclass(eq=False)
class TickHandle:
    """Handle for one scheduled callback; invalid once fired or cancelled."""

    id: int
    callback: TickCallback
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class Scheduler(ABC):
    """Runs callbacks at the next display refresh."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._pending: list[TickHandle] = []

    @abstractmethod
    def now(self) -> float:
        """Current clock reading in milliseconds."""
        raise NotImplementedError

    @property
    def pending(self) -> tuple[TickHandle, ...]:
        return tuple(handle for handle in self._pending if handle.active)

    def request(self, callback: TickCallback) -> TickHandle:
        """
        Schedule ``callback(now)`` for the next refresh.

        Returns:
            A handle that must be cancelled before it is replaced
        """
        handle = TickHandle(next(self._ids), callback)
        self._pending.append(handle)
        return handle

    def cancel(self, handle: TickHandle | None) -> None:
        if handle is None:
            return
        handle.cancelled = True
        if handle in self._pending:
            self._pending.remove(handle)

    def run_due(self) -> int:
        """
        Fire the callbacks that were pending at the start of this refresh.

        Callbacks requested while firing wait for the next refresh.

        Returns:
            Number of callbacks fired
        """
        due, self._pending = self._pending, []
        timestamp = self.now()
        fired = 0
        for handle in due:
            if not handle.active:
                continue
            handle.fired = True
            handle.callback(timestamp)
            fired += 1
        return fired


class ManualScheduler(Scheduler):
    """Deterministic scheduler whose clock only moves when told to."""

    def __init__(self, start: float = 0.0):
        super().__init__()
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, ms: float = FRAME_DURATION_MS) -> int:
        """Move the clock forward and run one refresh."""
        self._now += ms
        return self.run_due()

    def run_until_idle(self, step: float = FRAME_DURATION_MS, max_refreshes: int = 100_000) -> int:
        """Advance refresh by refresh until nothing is pending."""
        refreshes = 0
        while self.pending and refreshes < max_refreshes:
            self.advance(step)
            refreshes += 1
        return refreshes


class RealtimeScheduler(Scheduler):
    """Scheduler backed by the monotonic performance counter."""

    def __init__(
        self,
        interval: float = FRAME_DURATION_MS,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        super().__init__()
        self.interval = interval
        self._clock = clock
        self._sleep = sleep

    def now(self) -> float:
        return self._clock() * 1000

    def run_until_idle(self, on_refresh: Callable[[], None] | None = None) -> None:
        """Sleep to each refresh and fire callbacks until none remain."""
        next_refresh = self.now()
        while self.pending:
            next_refresh += self.interval
            delay = next_refresh - self.now()
            if delay > 0:
                self._sleep(delay / 1000)
            self.run_due()
            if on_refresh is not None:
                on_refresh()
