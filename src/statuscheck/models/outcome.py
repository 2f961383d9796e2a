# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe outcome models and their persisted record shape."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
UNREPRESENTABLE_TIMESTAMP = "0"
UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class Success:
    """The endpoint answered; any status code counts, 4xx/5xx included."""

    status_code: int

    def __post_init__(self) -> None:
        if not 0 <= self.status_code <= 0xFFFF:
            raise ValueError(f"status code out of range: {self.status_code}")

    def to_dict(self) -> dict[str, Any]:
        return {"Ok": self.status_code}


@dataclass(frozen=True)
class Failure:
    """Every attempt failed at the transport level."""

    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"Err": self.message}


ProbeResult = Union[Success, Failure]


def short_error(message: str) -> str:
    """Text before the first ':' of a failure message, or a fixed fallback when there is none."""
    head, sep, _ = message.partition(":")
    head = head.strip()
    if not sep or not head:
        return UNKNOWN_ERROR
    return head


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProbeOutcome:
    """Terminal result of probing one URL."""

    url: str
    result: ProbeResult
    elapsed: timedelta
    observed_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("outcome url must be non-empty")
        if self.elapsed < timedelta(0):
            raise ValueError("elapsed must be non-negative")

    @property
    def ok(self) -> bool:
        return isinstance(self.result, Success)

    @property
    def status_code(self) -> int | None:
        return self.result.status_code if isinstance(self.result, Success) else None

    @property
    def error_message(self) -> str | None:
        return self.result.message if isinstance(self.result, Failure) else None

    @property
    def response_time_ms(self) -> int:
        return self.elapsed // timedelta(milliseconds=1)

    @property
    def timestamp(self) -> str:
        """Whole seconds since the Unix epoch, or "0" for instants before it."""
        observed = self.observed_at
        if observed.tzinfo is None:
            observed = observed.replace(tzinfo=timezone.utc)
        if observed < EPOCH:
            return UNREPRESENTABLE_TIMESTAMP
        return str((observed - EPOCH) // timedelta(seconds=1))

    def progress_line(self) -> str:
        seconds = int(self.elapsed.total_seconds())
        if isinstance(self.result, Success):
            return f"[{seconds}] {self.url} => {self.result.status_code}"
        return f"[{seconds}] {self.url} => ERROR: {short_error(self.result.message)}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "action_status": self.result.to_dict(),
            "response_time_ms": self.response_time_ms,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ProbeOutcome:
        """Rebuild an outcome from a persisted record. Timestamps keep whole-second precision."""
        status = data.get("action_status")
        if not isinstance(status, Mapping) or len(status) != 1:
            raise ValueError(f"malformed action_status: {status!r}")
        result: ProbeResult
        if "Ok" in status:
            result = Success(int(status["Ok"]))
        elif "Err" in status:
            result = Failure(str(status["Err"]))
        else:
            raise ValueError(f"malformed action_status: {status!r}")
        seconds = int(data.get("timestamp") or 0)
        return cls(
            url=str(data["url"]),
            result=result,
            elapsed=timedelta(milliseconds=int(data.get("response_time_ms") or 0)),
            observed_at=EPOCH + timedelta(seconds=seconds),
        )
