"""Cancellable sleep used between status polls."""

import asyncio


class SleepCancelledError(Exception):
    """Sleep has been interrupted by cancel()."""


class Sleeper:
    """Suspend the current task for a while, unless cancelled.

    The sleep does not block other tasks running in the same event loop.
    Calling cancel() wakes up a pending sleep (and every future one) with
    SleepCancelledError.
    """

    def __init__(self) -> None:
        """Initialize the class instance."""
        self._cancelled = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        """Check if the sleeper has been cancelled."""
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Interrupt pending and future sleeps."""
        self._cancelled.set()

    async def sleep(self, seconds: float) -> None:
        """Sleep for the given number of seconds."""
        if self.cancelled:
            raise SleepCancelledError("sleep cancelled")
        try:
            await asyncio.wait_for(self._cancelled.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return
        raise SleepCancelledError("sleep cancelled")
