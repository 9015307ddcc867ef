"""A sender and a receiver bundled into one two-way endpoint."""

from __future__ import annotations

import queue
from dataclasses import dataclass
from typing import Any


@dataclass
class Channel:
    """Sends on ``tx`` and receives from ``rx``."""

    tx: queue.Queue
    rx: queue.Queue

    def send(self, item: Any) -> None:
        """Send ``item`` to the other end."""
        self.tx.put(item)

    def receive(self, timeout: float | None = None) -> Any:
        """Return the next item from the other end.

        Blocks until one arrives, or raises :class:`TimeoutError` once
        ``timeout`` seconds have passed without one.
        """
        try:
            return self.rx.get(timeout=timeout) if timeout is None or timeout > 0 else self.rx.get_nowait()
        except queue.Empty:
            raise TimeoutError("no item received before the timeout") from None


def channel_pair() -> tuple[Channel, Channel]:
    """Return two channels wired to each other."""
    forward: queue.Queue = queue.Queue()
    backward: queue.Queue = queue.Queue()
    return Channel(forward, backward), Channel(backward, forward)