# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared pool of URLs waiting to be probed."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterable


class JobQueue:
    """
    Thread-safe queue drained by the workers.

    `take()` removes and returns one URL under the lock, so each URL is
    handed to exactly one caller. The queue is filled once and never refilled.
    """

    def __init__(self, urls: Iterable[str] = ()):
        self._items: deque[str] = deque(urls)
        self._lock = threading.Lock()

    def take(self) -> str | None:
        """Return the next URL, or None once the queue is empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items.popleft()

    def is_empty(self) -> bool:
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
