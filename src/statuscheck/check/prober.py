# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-URL probe: one GET with bounded retries, timed from the first attempt."""

from __future__ import annotations

import logging
import time
from datetime import timedelta

from ..http.client import HttpClient
from ..http.models import HttpRequest, RetryConfig
from ..http.retry import send_with_retries
from ..models import Failure, ProbeOutcome, ProbeResult, Success
from ..models.outcome import UNKNOWN_ERROR

logger = logging.getLogger(__name__)


def probe(
    client: HttpClient,
    url: str,
    *,
    timeout: float | None = None,
    retry_config: RetryConfig | None = None,
) -> ProbeOutcome:
    """
    Probe `url` and return exactly one outcome.

    `elapsed` covers every attempt up to the one that ended the probe,
    including the delays between them. Transport errors never escape.
    """
    cfg = retry_config or RetryConfig()
    request = HttpRequest(url=url, timeout=timeout)

    started = time.perf_counter()
    response = send_with_retries(client, request, retry_config=cfg)
    elapsed = timedelta(seconds=time.perf_counter() - started)

    result: ProbeResult
    if response.status_code is not None:
        result = Success(response.status_code)
    else:
        result = Failure(response.error_message or response.error_type or UNKNOWN_ERROR)

    if isinstance(result, Failure):
        logger.debug(
            "Probed %s in %d attempt(s): %s [%s]",
            url,
            response.meta.get("attempts", 1),
            result,
            response.meta.get("error_category", "UNKNOWN_ERROR"),
        )
    else:
        logger.debug("Probed %s in %d attempt(s): %s", url, response.meta.get("attempts", 1), result)
    return ProbeOutcome(url=url, result=result, elapsed=elapsed)
