# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import queue
import threading

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse


def _failure(request: HttpRequest, exc: BaseException) -> HttpResponse:
    return HttpResponse(
        ok=False,
        url=request.url,
        error_message=str(exc) or type(exc).__name__,
        error_type=type(exc).__name__,
        meta={"error_category": categorize_exception(exc).value},
    )


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    One instance is shared by every worker; `httpx.Client` pools connections
    and is safe for concurrent use from several threads.

    httpx timeouts apply to each connect/read/write step separately, so a
    server trickling its response can outlast them. Each request therefore
    runs on its own daemon thread and is abandoned once `timeout` seconds
    have passed in total.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        results: queue.Queue[HttpResponse] = queue.Queue(maxsize=1)

        thread = threading.Thread(
            target=lambda: results.put(self._send(request, timeout)),
            name=f"{threading.current_thread().name}-request",
            daemon=True,
        )
        thread.start()
        try:
            return results.get(timeout=timeout)
        except queue.Empty:
            return _failure(request, TimeoutError(f"timed out: no response from {request.url} within {timeout:g}s"))

    def _send(self, request: HttpRequest, timeout: float) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)

        try:
            # Only the status line matters, so the body is never read.
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=timeout,
                follow_redirects=request.allow_redirects,
            ) as resp:
                return HttpResponse(
                    ok=True,
                    status_code=resp.status_code,
                    headers=dict(resp.headers),
                    url=str(resp.url),
                )
        except Exception as exc:  # noqa: BLE001
            return _failure(request, exc)

    def close(self) -> None:
        self._client.close()
