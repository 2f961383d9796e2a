# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level statuscheck facade."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress

from .check.engine import CheckEngine
from .config import HttpSettings, RunConfig, load_http_settings
from .http.client import HttpClient, create_default_http_client
from .models import ProbeOutcome


class StatusChecker:
    """
    Convenience wrapper that owns the HTTP client shared by every worker.

    The client is built once from settings and closed with the facade.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        settings: HttpSettings | None = None,
        emit: Callable[[str], None] | None = None,
    ):
        self.http_settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.engine = CheckEngine(self.http_client, settings=self.http_settings, emit=emit)

    def check(self, config: RunConfig) -> list[ProbeOutcome]:
        """Probe every URL and return outcomes in completion order without writing a report."""
        return self.engine.collect(config)

    def run(self, config: RunConfig) -> list[ProbeOutcome]:
        """Probe every URL and persist the report to `config.report_path`."""
        return self.engine.run(config)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> StatusChecker:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
