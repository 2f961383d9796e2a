# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""JSON report persistence."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from ..errors import ReportWriteError
from ..models import ProbeOutcome

logger = logging.getLogger(__name__)


class ReportWriter:
    """
    Writes the collected outcomes as a JSON array, one record per outcome.

    The document is written to a temporary file next to the destination and
    moved into place, so the destination holds either the full report or
    whatever was there before.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path)

    def render(self, outcomes: Sequence[ProbeOutcome]) -> str:
        return json.dumps([outcome.to_dict() for outcome in outcomes], indent=2) + "\n"

    def write(self, outcomes: Sequence[ProbeOutcome]) -> Path:
        document = self.render(outcomes)
        tmp_name: str | None = None
        try:
            directory = self.path.parent
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(document)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            raise ReportWriteError(str(self.path), exc) from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("Could not remove temporary report %s", tmp_name)
        logger.info("Wrote %d record(s) to %s", len(outcomes), self.path)
        return self.path


def read_report(path: str | os.PathLike[str]) -> list[ProbeOutcome]:
    """Load a report written by ReportWriter."""
    with open(path, encoding="utf-8") as handle:
        records = json.load(handle)
    if not isinstance(records, list):
        raise ValueError("report must be a JSON array")
    return [ProbeOutcome.from_mapping(record) for record in records]
