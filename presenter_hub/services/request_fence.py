"""Tickets for discarding superseded generation results.

Each generation request takes a ticket. When its response arrives, the
result is only accepted if no newer ticket has been issued in the meantime
(last request wins).
"""

import threading


class RequestFence:
    """Issues increasing tickets and tells whether one is still the latest."""

    def __init__(self):
        self._lock = threading.Lock()
        self._latest = 0

    def issue(self) -> int:
        """Take a ticket for a new request, superseding all earlier ones."""
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, ticket: int) -> bool:
        """True if no request was issued after this ticket."""
        with self._lock:
            return ticket == self._latest

    @property
    def latest(self) -> int:
        with self._lock:
            return self._latest
