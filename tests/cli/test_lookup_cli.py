from __future__ import annotations

import json
from pathlib import Path

import pytest

from lookup_stack.app.cli import EXIT_CONFIG, EXIT_MISSING, EXIT_OK, parse_args, render_value, run
from lookup_stack.adapters.mapping import MappingLookup
from lookup_stack.main import main

_CONFIG = """\
version: 1
data:
  app.name: demo
  raw: literal
  config:
    db:
      host: localhost
      port: 3306
layers:
  - kind: prefix
    prefix: "app."
    strict: false
  - kind: path
"""


def _write_config(tmp_path: Path, text: str = _CONFIG) -> Path:
    path = tmp_path / "stack.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_args_reads_flags() -> None:
    args = parse_args(["--config", "cfg.yml", "--log-sink", "stderr", "get", "config/db/host"])
    assert args.config == "cfg.yml"
    assert args.log_sink == "stderr"
    assert args.log_path is None
    assert args.command == "get"
    assert args.key == "config/db/host"


def test_parse_args_requires_command() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--config", "cfg.yml"])


def test_get_prints_json_value(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path)
    assert run(["--config", str(path), "get", "config/db/port"]) == EXIT_OK
    assert json.loads(capsys.readouterr().out) == 3306


def test_get_resolves_prefixed_and_fallback_keys(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # Non-strict prefix layer serves both "name" (as app.name) and the raw key.
    path = _write_config(tmp_path)
    assert run(["--config", str(path), "get", "name"]) == EXIT_OK
    assert run(["--config", str(path), "get", "raw"]) == EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line) for line in lines] == ["demo", "literal"]


def test_get_nested_node_prints_type(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path)
    assert run(["--config", str(path), "get", "config/db"]) == EXIT_OK
    assert json.loads(capsys.readouterr().out) == {"lookup": "HierarchicalLookup"}


def test_get_missing_key_exits_with_missing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path)
    assert run(["--config", str(path), "get", "config/db/user"]) == EXIT_MISSING
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "does not exist" in captured.err


def test_has_reports_boolean_and_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path)
    assert run(["--config", str(path), "has", "config/db/host"]) == EXIT_OK
    assert run(["--config", str(path), "has", "config/db/user"]) == EXIT_MISSING
    assert capsys.readouterr().out.splitlines() == ["true", "false"]


def test_invalid_config_exits_with_config_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path, "version: 1\n")
    assert run(["--config", str(path), "get", "x"]) == EXIT_CONFIG
    assert "config error" in capsys.readouterr().err


def test_missing_config_file_exits_with_config_error(tmp_path: Path) -> None:
    assert run(["--config", str(tmp_path / "absent.yml"), "get", "x"]) == EXIT_CONFIG


def test_log_path_override_writes_jsonl(tmp_path: Path) -> None:
    # --log-path alone selects the jsonl sink.
    path = _write_config(tmp_path)
    log_path = tmp_path / "logs" / "lookup.jsonl"
    assert run(["--config", str(path), "--log-path", str(log_path), "get", "raw"]) == EXIT_OK
    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert [r["message"] for r in records] == ["prefix_fallback"]
    assert records[0]["fields"] == {"key": "raw", "prefix": "app."}


def test_jsonl_override_without_path_is_config_error(tmp_path: Path) -> None:
    path = _write_config(tmp_path)
    assert run(["--config", str(path), "--log-sink", "jsonl", "get", "raw"]) == EXIT_CONFIG


def test_stderr_log_sink_keeps_stdout_clean(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path)
    assert run(["--config", str(path), "--log-sink", "stderr", "get", "config/db/host"]) == EXIT_OK
    captured = capsys.readouterr()
    assert json.loads(captured.out) == "localhost"
    messages = [json.loads(line)["message"] for line in captured.err.splitlines()]
    assert messages == ["prefix_fallback", "node_materialized", "node_materialized"]


def test_render_value_passes_scalars_through() -> None:
    assert render_value(3306) == 3306
    assert render_value(MappingLookup()) == {"lookup": "MappingLookup"}


def test_main_delegates_to_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path)
    assert main(["--config", str(path), "has", "name"]) == EXIT_OK
    assert capsys.readouterr().out == "true\n"


def test_get_numeric_yaml_key_from_data_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "data.yml").write_text("ports:\n  80: http\n", encoding="utf-8")
    path = _write_config(tmp_path, "version: 1\ndata_file: data.yml\nlayers:\n  - kind: path\n")
    assert run(["--config", str(path), "get", "ports/80"]) == EXIT_OK
    assert json.loads(capsys.readouterr().out) == "http"
