# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

import threading
from dataclasses import replace

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests and dry runs."""

    def __init__(self, responses: dict[str, HttpResponse] | None = None):
        self._responses = responses or {}
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        if request.url in self._responses:
            # Callers annotate meta, so each caller gets its own copy.
            stub = self._responses[request.url]
            return replace(stub, headers=dict(stub.headers), meta=dict(stub.meta))
        return HttpResponse(ok=False, status_code=None, url=request.url, error_message="No stubbed response configured")

    def calls_for(self, url: str) -> int:
        with self._lock:
            return sum(1 for r in self.requests if r.url == url)

    def close(self) -> None:
        self.closed = True
