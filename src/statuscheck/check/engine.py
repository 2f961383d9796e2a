# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Check engine: drain the URL queue concurrently, collect outcomes, persist the report."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import HttpSettings, RunConfig, load_http_settings
from ..http.client import HttpClient
from ..http.models import RetryConfig
from ..models import ProbeOutcome
from .channel import OutcomeChannel
from .collector import ResultCollector
from .jobs import JobQueue
from .pool import WorkerPool
from .report import ReportWriter

logger = logging.getLogger(__name__)


class CheckEngine:
    """Coordinates the worker pool, the collector and the report writer for one run."""

    def __init__(
        self,
        client: HttpClient,
        *,
        settings: HttpSettings | None = None,
        emit: Callable[[str], None] | None = None,
    ):
        self.client = client
        self.settings = settings or load_http_settings()
        self.emit = emit

    def collect(self, config: RunConfig) -> list[ProbeOutcome]:
        """Probe every URL in `config` and return outcomes in completion order."""
        jobs = JobQueue(config.urls)
        channel = OutcomeChannel()
        pool = WorkerPool(
            self.client,
            worker_count=config.workers,
            timeout=config.timeout,
            retry_config=RetryConfig(retries=config.retries, delay=self.settings.retry_delay),
        )
        collector = ResultCollector(self.emit)

        logger.info(
            "Checking %d URL(s) with %d worker(s), timeout=%ss, retries=%d",
            len(config.urls),
            config.workers,
            config.timeout,
            config.retries,
        )
        pool.start(jobs, channel)
        try:
            return collector.collect(channel)
        finally:
            pool.join()

    def run(self, config: RunConfig) -> list[ProbeOutcome]:
        """Collect every outcome, then write the report. Raises ReportWriteError if it cannot be written."""
        outcomes = self.collect(config)
        ReportWriter(config.report_path).write(outcomes)
        return outcomes
