"""
Fixed-cadence driver for a running round.

The game core never schedules itself. A host that wants ticks on a timer owns
a Ticker, points it at LightCycleGame.advance_tick (or anything else), and
stops it when the window closes or the round is over.
"""

import logging
import threading
import time

logger = logging.getLogger(__name__)


class Ticker:
    """Calls `callback` every `period_ms` milliseconds on a background thread.

    The callback returning False stops the ticker. So does an exception, which
    is logged and kept in `error`. Once stop() returns no further call fires.
    """

    def __init__(self, callback, period_ms=70, name="lightcycle-ticker"):
        if period_ms <= 0:
            raise ValueError("period_ms must be > 0")
        self.callback = callback
        self.period = period_ms / 1000.0
        self.name = name

        self.ticks = 0
        self.error = None
        self._thread = None
        self._stop_event = threading.Event()
        # Held while the callback runs so stop() can't interleave with a tick
        self._gate = threading.RLock()

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive() and not self._stop_event.is_set()

    def start(self):
        if self._thread is not None:
            raise RuntimeError("a Ticker can only be started once")
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        return self

    def stop(self, timeout=None):
        """Halt the ticker and wait for its thread; safe to call repeatedly"""
        with self._gate:
            self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run(self):
        deadline = time.monotonic()
        while True:
            deadline += self.period
            if self._stop_event.wait(max(0.0, deadline - time.monotonic())):
                return

            with self._gate:
                if self._stop_event.is_set():
                    return
                try:
                    keep_going = self.callback()
                except Exception as e:
                    logger.exception("Tick callback failed, stopping %s", self.name)
                    self.error = e
                    self._stop_event.set()
                    return
                self.ticks += 1

            if keep_going is False:
                self._stop_event.set()
                return

            # Don't try to catch up after a stall, just resume the cadence
            now = time.monotonic()
            if deadline < now - self.period:
                deadline = now

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
