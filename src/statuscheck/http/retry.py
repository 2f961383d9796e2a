# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Retry helper for HttpClient implementations."""

from __future__ import annotations

import logging
import time

from ..config import load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse, RetryConfig

logger = logging.getLogger(__name__)


def build_default_retry_config() -> RetryConfig:
    """Create a RetryConfig from environment-backed HttpSettings."""
    return RetryConfig.from_settings(load_http_settings())


def send_with_retries(
    client: HttpClient,
    request: HttpRequest,
    *,
    retry_config: RetryConfig | None = None,
) -> HttpResponse:
    """
    Execute a request, retrying transport failures with a fixed delay.

    The loop makes at most `retry_config.max_attempts` requests. Any response
    carrying a status code ends it immediately; exceptions raised by the
    client are folded into a failed response rather than propagated.
    `meta["attempts"]` records how many requests were made.
    """
    cfg = retry_config or build_default_retry_config()

    attempt = 0
    while True:
        attempt += 1
        try:
            response = client.request(request)
        except Exception as exc:  # noqa: BLE001
            response = HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc) or exc.__class__.__name__,
                error_type=exc.__class__.__name__,
                meta={"error_category": categorize_exception(exc).value},
            )
        response.meta["attempts"] = attempt

        if response.ok or response.status_code is not None:
            return response

        if attempt >= cfg.max_attempts:
            response.meta["retry_exhausted"] = True
            return response

        logger.debug(
            "Attempt %d/%d for %s failed [%s] (%s), retrying in %.2fs",
            attempt,
            cfg.max_attempts,
            request.url,
            response.meta.get("error_category", "UNKNOWN_ERROR"),
            response.error_message,
            cfg.delay,
        )
        time.sleep(cfg.delay)
