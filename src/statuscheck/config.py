# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for statuscheck."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import NoTargetsError
from .version import __version__

DEFAULT_USER_AGENT = f"statuscheck/{__version__}"
DEFAULT_REPORT_PATH = "status.json"


def default_worker_count() -> int:
    """CPUs this process may run on, resolved once when a configuration is built."""
    if hasattr(os, "process_cpu_count"):
        return os.process_cpu_count() or 4
    if hasattr(os, "sched_getaffinity"):
        try:
            return len(os.sched_getaffinity(0)) or 4
        except OSError:
            pass
    return os.cpu_count() or 4


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 5.0
    max_retries: int = 0
    retry_delay: float = 0.1
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    workers: int = field(default_factory=default_worker_count)
    report_path: str = DEFAULT_REPORT_PATH

    @classmethod
    def from_env(cls) -> HttpSettings:
        """Create settings from environment variables (evaluated at call time)."""
        defaults = cls()
        timeout = _float_env("STATUSCHECK_HTTP_TIMEOUT", defaults.timeout)
        if timeout <= 0:
            timeout = defaults.timeout
        max_retries = _int_env("STATUSCHECK_HTTP_RETRIES", defaults.max_retries)
        if max_retries < 0:
            max_retries = defaults.max_retries
        retry_delay = _float_env("STATUSCHECK_HTTP_RETRY_DELAY", defaults.retry_delay)
        if retry_delay < 0:
            retry_delay = defaults.retry_delay
        workers = _int_env("STATUSCHECK_WORKERS", defaults.workers)
        if workers < 1:
            workers = defaults.workers
        return cls(
            timeout=timeout,
            max_retries=max_retries,
            retry_delay=retry_delay,
            user_agent=os.getenv("STATUSCHECK_USER_AGENT", defaults.user_agent),
            allow_redirects=_bool_env("STATUSCHECK_HTTP_REDIRECTS", defaults.allow_redirects),
            verify_ssl=_bool_env("STATUSCHECK_HTTP_VERIFY_SSL", defaults.verify_ssl),
            workers=workers,
            report_path=os.getenv("STATUSCHECK_REPORT_PATH") or defaults.report_path,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


@dataclass(frozen=True)
class RunConfig:
    """
    Immutable parameters for one checking run.

    `retries` counts the attempts allowed *after* the first one, so a probe
    makes at most `retries + 1` requests.
    """

    urls: tuple[str, ...]
    workers: int
    timeout: float
    retries: int
    report_path: str = DEFAULT_REPORT_PATH

    @classmethod
    def create(
        cls,
        urls: Iterable[str],
        *,
        workers: int | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        report_path: str | None = None,
        settings: HttpSettings | None = None,
    ) -> RunConfig:
        """Build a run configuration, rejecting an empty target list."""
        settings = settings or load_http_settings()
        targets = tuple(url for url in urls if url)
        if not targets:
            raise NoTargetsError("No URLs to check")
        return cls(
            urls=targets,
            workers=workers if workers is not None and workers >= 1 else settings.workers,
            timeout=timeout if timeout is not None and timeout > 0 else settings.timeout,
            retries=retries if retries is not None and retries >= 0 else settings.max_retries,
            report_path=report_path or settings.report_path,
        )
