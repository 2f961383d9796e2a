# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for statuscheck."""

from ..http.models import Headers, HttpRequest, HttpResponse, RetryConfig
from .outcome import Failure, ProbeOutcome, ProbeResult, Success, short_error

__all__ = [
    "Failure",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeOutcome",
    "ProbeResult",
    "RetryConfig",
    "Success",
    "short_error",
]
