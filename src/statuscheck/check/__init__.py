# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Concurrent probing engine."""

from .channel import OutcomeChannel, OutcomeSender
from .collector import ResultCollector
from .engine import CheckEngine
from .jobs import JobQueue
from .pool import WorkerPool
from .prober import probe
from .report import ReportWriter, read_report

__all__ = [
    "CheckEngine",
    "JobQueue",
    "OutcomeChannel",
    "OutcomeSender",
    "ReportWriter",
    "ResultCollector",
    "WorkerPool",
    "probe",
    "read_report",
]
