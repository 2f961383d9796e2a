# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Accumulates outcomes in completion order and streams progress lines."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable

from ..models import ProbeOutcome


def _print_line(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


class ResultCollector:
    """Single consumer of the outcome stream."""

    def __init__(self, emit: Callable[[str], None] | None = None):
        self._emit = emit or _print_line
        self.outcomes: list[ProbeOutcome] = []

    def add(self, outcome: ProbeOutcome) -> None:
        self.outcomes.append(outcome)
        self._emit(outcome.progress_line())

    def collect(self, stream: Iterable[ProbeOutcome]) -> list[ProbeOutcome]:
        """Consume `stream` until it is exhausted and return everything gathered so far."""
        for outcome in stream:
            self.add(outcome)
        return list(self.outcomes)
