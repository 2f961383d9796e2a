# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""statuscheck CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable

from ..config import HttpSettings, RunConfig, load_http_settings
from ..errors import NoTargetsError, ReportWriteError
from ..http import create_default_http_client
from ..log import setup_logging
from ..runtime import StatusChecker

EXIT_OK = 0
EXIT_REPORT_FAILED = 1
EXIT_NO_TARGETS = 2

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statuscheck",
        description="Probe HTTP endpoints concurrently and write a JSON status report",
    )
    parser.add_argument("urls", nargs="*", metavar="URL", help="Endpoint to check")
    parser.add_argument(
        "--file",
        dest="files",
        action="append",
        default=[],
        metavar="PATH",
        help="Read more URLs from PATH, one per line ('#' starts a comment line)",
    )
    # Numeric flags are parsed leniently: a bad value keeps the default instead of aborting.
    parser.add_argument("--workers", metavar="N", help="Number of concurrent workers (default: CPU count)")
    parser.add_argument("--timeout", metavar="S", help="Per-request timeout in whole seconds (default: 5)")
    parser.add_argument("--retries", metavar="N", help="Extra attempts after a failed request (default: 0)")
    parser.add_argument("--output", metavar="PATH", help="Report destination (default: status.json)")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--log-level", metavar="LEVEL", help="Logging level (default: WARNING)")
    return parser


def _parse_int(raw: str | None, default: int, *, minimum: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def read_url_file(path: str) -> list[str]:
    """Return the URLs listed in `path`, skipping blank and '#' lines. Unreadable files yield nothing."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring URL file %s: %s", path, exc)
        return []
    urls = []
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            urls.append(stripped)
    return urls


def collect_urls(positional: Iterable[str], files: Iterable[str]) -> list[str]:
    urls: list[str] = []
    for path in files:
        urls.extend(read_url_file(path))
    urls.extend(url for url in positional if url)
    return urls


def build_run_config(args: argparse.Namespace, settings: HttpSettings) -> RunConfig:
    return RunConfig.create(
        collect_urls(args.urls, args.files),
        workers=_parse_int(args.workers, settings.workers, minimum=1),
        timeout=_parse_int(args.timeout, int(settings.timeout), minimum=1),
        retries=_parse_int(args.retries, settings.max_retries, minimum=0),
        report_path=args.output,
        settings=settings,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    setup_logging(args.log_level)

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    try:
        config = build_run_config(args, settings)
    except NoTargetsError:
        parser.print_usage(sys.stderr)
        sys.stderr.write(f"{parser.prog}: error: no URLs given on the command line or via --file\n")
        return EXIT_NO_TARGETS

    http_client = create_default_http_client(settings)

    try:
        with StatusChecker(http_client=http_client, settings=settings) as checker:
            checker.run(config)
    except ReportWriteError as exc:
        logger.error("%s", exc)
        sys.stderr.write(f"{parser.prog}: error: {exc}\n")
        return EXIT_REPORT_FAILED

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
