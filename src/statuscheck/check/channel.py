# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Many-producer, single-consumer channel for probe outcomes."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator

from ..models import ProbeOutcome

_CLOSED = object()


class OutcomeSender:
    """Producer handle. Closing it tells the receiver this producer is done."""

    def __init__(self, channel: OutcomeChannel):
        self._channel = channel
        self._closed = False

    def send(self, outcome: ProbeOutcome) -> None:
        if self._closed:
            raise RuntimeError("send on a closed sender")
        self._channel._queue.put(outcome)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._channel._queue.put(_CLOSED)

    def __enter__(self) -> OutcomeSender:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


class OutcomeChannel:
    """
    Fan-in point between workers and the collector.

    Iterating blocks for the next outcome and stops only after every sender
    handed out by `sender()` has been closed and all their outcomes have been
    yielded. Senders must be created before iteration starts.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue[object] = queue.Queue()
        self._lock = threading.Lock()
        self._open_senders = 0

    def sender(self) -> OutcomeSender:
        with self._lock:
            self._open_senders += 1
        return OutcomeSender(self)

    @property
    def open_senders(self) -> int:
        with self._lock:
            return self._open_senders

    def __iter__(self) -> Iterator[ProbeOutcome]:
        while self.open_senders:
            item = self._queue.get()
            if item is _CLOSED:
                with self._lock:
                    self._open_senders -= 1
                continue
            yield item  # type: ignore[misc]
