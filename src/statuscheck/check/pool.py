# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fixed-size thread pool draining a JobQueue."""

from __future__ import annotations

import logging
import threading

from ..http.client import HttpClient
from ..http.models import RetryConfig
from .channel import OutcomeChannel, OutcomeSender
from .prober import probe
from .jobs import JobQueue

logger = logging.getLogger(__name__)


class WorkerPool:
    """
    Runs `worker_count` threads that pull URLs until the queue is empty.

    Every worker owns one sender on the outcome channel and closes it when it
    exits, so the channel's consumer finishes once all workers are done.
    """

    def __init__(
        self,
        client: HttpClient,
        *,
        worker_count: int,
        timeout: float | None = None,
        retry_config: RetryConfig | None = None,
    ):
        if worker_count < 1:
            raise ValueError("worker_count must be at least 1")
        self.client = client
        self.worker_count = worker_count
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()
        self._threads: list[threading.Thread] = []

    def start(self, jobs: JobQueue, sink: OutcomeChannel) -> None:
        """Spawn the workers and return without waiting for them."""
        if self._threads:
            raise RuntimeError("pool already started")
        # Register every sender up front so the consumer cannot observe zero producers early.
        senders = [sink.sender() for _ in range(self.worker_count)]
        for index, sender in enumerate(senders):
            thread = threading.Thread(
                target=self._work,
                args=(jobs, sender),
                name=f"statuscheck-worker-{index}",
                daemon=True,
            )
            self._threads.append(thread)
            thread.start()
        logger.debug("Started %d workers", self.worker_count)

    def join(self) -> None:
        for thread in self._threads:
            thread.join()

    def run(self, jobs: JobQueue, sink: OutcomeChannel) -> None:
        """Start the workers and block until all of them have exited."""
        self.start(jobs, sink)
        self.join()

    def _work(self, jobs: JobQueue, sender: OutcomeSender) -> None:
        with sender:
            processed = 0
            while True:
                url = jobs.take()
                if url is None:
                    break
                sender.send(probe(self.client, url, timeout=self.timeout, retry_config=self.retry_config))
                processed += 1
            logger.debug("%s exiting after %d URL(s)", threading.current_thread().name, processed)
