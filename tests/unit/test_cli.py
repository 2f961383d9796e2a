# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
import time

import pytest

from statuscheck.cli import main as cli_main
from statuscheck.cli.main import build_parser, build_run_config, collect_urls, read_url_file
from statuscheck.config import HttpSettings, RunConfig
from statuscheck.http.adapters import StubHttpClient
from statuscheck.http.models import HttpResponse
from statuscheck.runtime import StatusChecker


@pytest.fixture
def stub_client(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _: None)
    stub = StubHttpClient(
        {
            "https://example.com": HttpResponse(ok=True, status_code=200),
            "https://teapot.example": HttpResponse(ok=True, status_code=418),
        }
    )
    captured = {}

    def factory(settings):
        captured["settings"] = settings
        return stub

    monkeypatch.setattr(cli_main, "create_default_http_client", factory)
    stub.captured = captured
    return stub


def _args(*argv):
    return build_parser().parse_intermixed_args(list(argv))


def test_read_url_file_skips_blank_and_comment_lines(tmp_path):
    path = tmp_path / "sites.txt"
    path.write_text("# production\nhttps://a.example\n\n   \n  https://b.example  \n  # disabled\n", encoding="utf-8")
    assert read_url_file(str(path)) == ["https://a.example", "https://b.example"]


def test_read_url_file_missing_is_ignored(tmp_path, caplog):
    assert read_url_file(str(tmp_path / "missing.txt")) == []
    assert "Ignoring URL file" in caplog.text


def test_collect_urls_merges_files_and_positionals(tmp_path):
    path = tmp_path / "sites.txt"
    path.write_text("https://a.example\n", encoding="utf-8")
    assert collect_urls(["https://b.example"], [str(path)]) == ["https://a.example", "https://b.example"]


def test_parser_accepts_flags_between_urls():
    args = _args("https://a", "--workers", "3", "https://b", "--retries", "2", "--file", "x.txt", "--file", "y.txt")
    assert args.urls == ["https://a", "https://b"]
    assert args.workers == "3"
    assert args.files == ["x.txt", "y.txt"]


def test_invalid_numeric_flags_fall_back_to_defaults():
    settings = HttpSettings(workers=6, timeout=5.0, max_retries=0)
    cfg = build_run_config(_args("https://a", "--workers", "many", "--timeout", "1.5", "--retries", "-2"), settings)
    assert (cfg.workers, cfg.timeout, cfg.retries) == (6, 5, 0)

    cfg = build_run_config(_args("https://a", "--workers", "0", "--timeout", "0"), settings)
    assert (cfg.workers, cfg.timeout) == (6, 5)

    cfg = build_run_config(_args("https://a", "--workers", "2", "--timeout", "9", "--retries", "4", "--output", "r.json"), settings)
    assert (cfg.workers, cfg.timeout, cfg.retries, cfg.report_path) == (2, 9, 4, "r.json")


def test_main_without_urls_exits_2_and_writes_nothing(tmp_path, monkeypatch, capsys, stub_client):
    monkeypatch.chdir(tmp_path)
    empty = tmp_path / "empty.txt"
    empty.write_text("# nothing here\n\n", encoding="utf-8")

    assert cli_main.main([]) == 2
    assert cli_main.main(["--file", str(empty)]) == 2

    err = capsys.readouterr().err
    assert "usage:" in err
    assert not (tmp_path / "status.json").exists()
    assert stub_client.requests == []


def test_main_end_to_end_with_mixed_results(tmp_path, monkeypatch, capsys, stub_client):
    monkeypatch.chdir(tmp_path)

    exit_code = cli_main.main(
        ["https://example.com", "https://nonexistent.invalid", "https://teapot.example", "--workers", "2", "--timeout", "5", "--retries", "1"]
    )

    assert exit_code == 0
    out_lines = capsys.readouterr().out.splitlines()
    assert sorted(out_lines) == [
        "[0] https://example.com => 200",
        "[0] https://nonexistent.invalid => ERROR: Unknown error",
        "[0] https://teapot.example => 418",
    ]
    records = json.loads((tmp_path / "status.json").read_text(encoding="utf-8"))
    by_url = {r["url"]: r for r in records}
    assert len(records) == 3
    assert by_url["https://example.com"]["action_status"] == {"Ok": 200}
    assert by_url["https://teapot.example"]["action_status"] == {"Ok": 418}
    assert by_url["https://nonexistent.invalid"]["action_status"] == {"Err": "No stubbed response configured"}
    assert stub_client.calls_for("https://nonexistent.invalid") == 2
    assert all(r["timestamp"].isdigit() for r in records)
    assert [r["url"] for r in records] == [line.split()[1] for line in out_lines]
    assert stub_client.closed is True


def test_main_ignore_ssl_errors_and_custom_output(tmp_path, stub_client):
    output = tmp_path / "reports" / "out.json"
    assert cli_main.main(["https://example.com", "--ignore-ssl-errors", "--output", str(output)]) == 0
    assert stub_client.captured["settings"].verify_ssl is False
    assert json.loads(output.read_text(encoding="utf-8"))[0]["url"] == "https://example.com"


def test_main_report_failure_exits_1(tmp_path, capsys, stub_client):  # noqa: ARG001
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    assert cli_main.main(["https://example.com", "--output", str(blocker / "status.json")]) == 1
    assert "Cannot write report" in capsys.readouterr().err


def test_status_checker_check_does_not_write_report(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    stub = StubHttpClient({"http://a": HttpResponse(ok=True, status_code=200)})
    lines = []

    with StatusChecker(http_client=stub, settings=HttpSettings(), emit=lines.append) as checker:
        outcomes = checker.check(RunConfig.create(["http://a"], workers=1, settings=HttpSettings()))

    assert [o.status_code for o in outcomes] == [200]
    assert lines == ["[0] http://a => 200"]
    assert not (tmp_path / "status.json").exists()
    assert stub.closed is True
