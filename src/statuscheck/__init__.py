# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
statuscheck package entrypoint.

This package probes many HTTP endpoints concurrently, retries transport
failures, records each endpoint's status code or error together with its
response time, and persists the results as a JSON report. HTTP behavior is
abstracted behind an injectable client interface, and outcomes are modeled
with typed dataclasses.
"""

from .check import CheckEngine, JobQueue, OutcomeChannel, ReportWriter, ResultCollector, WorkerPool, probe, read_report
from .config import HttpSettings, RunConfig, load_http_settings
from .errors import NoTargetsError, ReportWriteError, StatusCheckError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    RetryConfig,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import Failure, ProbeOutcome, Success
from .runtime import StatusChecker
from .version import __version__

__all__ = [
    "CheckEngine",
    "Failure",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "JobQueue",
    "NoTargetsError",
    "OutcomeChannel",
    "ProbeOutcome",
    "ReportWriteError",
    "ReportWriter",
    "ResultCollector",
    "RetryConfig",
    "RunConfig",
    "StatusCheckError",
    "StatusChecker",
    "StubHttpClient",
    "Success",
    "WorkerPool",
    "create_default_http_client",
    "load_http_settings",
    "probe",
    "read_report",
    "setup_logging",
    "__version__",
]
