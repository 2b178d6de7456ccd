"""Tests for the senulator command line."""

import json
import sys
from pathlib import Path

import pytest

from senulator import cli


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["senulator", *argv])
    cli.main()


def test_generate_prints_senml(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """generate prints a SenML JSON pack to stdout."""
    _run(monkeypatch, "generate", "--request", "water_meter", "--seed", "1")
    pack = json.loads(capsys.readouterr().out)
    assert len(pack) == 96
    assert pack[0]["bn"] == "urn:dev:ow:10e2073a01080063"
    assert pack[-1]["t"] == 85500.0


def test_generate_seed_from_env_is_reproducible(
    monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    """SENULATOR_SEED makes two runs print identical output."""
    monkeypatch.setenv("SENULATOR_SEED", "7")
    _run(monkeypatch, "generate", "--request", "water_meter", "--format", "jsonl")
    first = capsys.readouterr().out
    _run(monkeypatch, "generate", "--request", "water_meter", "--format", "jsonl")
    assert capsys.readouterr().out == first
    assert len(first.splitlines()) == 96


def test_generate_to_file(monkeypatch: pytest.MonkeyPatch, capsys, tmp_path: Path) -> None:
    """--output-file writes the pack and prints a summary."""
    out = tmp_path / "water.json"
    _run(
        monkeypatch,
        "generate",
        "--request",
        "water_meter",
        "--seed",
        "3",
        "--compact",
        "--output-file",
        str(out),
    )
    pack = json.loads(out.read_text(encoding="utf-8"))
    assert len(pack) == 96
    assert "bn" not in pack[1]
    assert "Generated 96 records" in capsys.readouterr().out


def test_generate_compact_with_jsonl_is_rejected(
    monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    """--compact only applies to JSON arrays; with jsonl it is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "generate", "--request", "water_meter", "--format", "jsonl", "--compact")
    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert "--compact" in captured.err
    assert captured.out == ""


def test_generate_writes_diagnostics_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """--log-exporter file exports the run summary."""
    log_file = tmp_path / "diag.jsonl"
    _run(
        monkeypatch,
        "--log-exporter",
        "file",
        "--log-file",
        str(log_file),
        "generate",
        "--request",
        "water_meter",
        "--seed",
        "1",
        "--output-file",
        str(tmp_path / "out.json"),
    )
    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert any(line["attributes"].get("request.records") == 96 for line in lines)


def test_generate_unknown_request_exits(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """An unknown request name exits with status 1 and lists alternatives."""
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "generate", "--request", "nope")
    assert exc_info.value.code == 1
    assert "water_meter" in capsys.readouterr().out


def test_generate_invalid_definition_exits(
    monkeypatch: pytest.MonkeyPatch, capsys, tmp_path: Path
) -> None:
    """A backwards window is reported and exits with status 1."""
    (tmp_path / "bad.yaml").write_text(
        "start: 10\nend: 0\nunits:\n  - {name: a, interval: 1, categories: [{range: [0, 1]}]}\n",
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "generate", "--request", "bad", "--requests-dir", str(tmp_path))
    assert exc_info.value.code == 1
    assert "end time before start time" in capsys.readouterr().out


def test_list_shows_sample_requests(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """list prints the bundled definitions."""
    _run(monkeypatch, "list")
    out = capsys.readouterr().out
    assert "water_meter" in out
    assert "thermostat" in out


def test_validate_reports_record_count(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """validate shows the derived record count without generating."""
    _run(monkeypatch, "validate", "--request", "water_meter")
    out = capsys.readouterr().out
    assert "Record count: 96" in out
    assert "volume [m3] every 900s, 3 categories" in out


def test_validate_bad_weights_fails(
    monkeypatch: pytest.MonkeyPatch, capsys, tmp_path: Path
) -> None:
    """Negative weights are caught by validate."""
    (tmp_path / "neg.yaml").write_text(
        "start: 0\nend: 60\nunits:\n  - {name: a, interval: 1, categories: [{weight: -1, range: [0, 1]}]}\n",
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "validate", "--request", "neg", "--requests-dir", str(tmp_path))
    assert exc_info.value.code == 1
    assert "Validation failed" in capsys.readouterr().out


def test_no_command_prints_help(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """Without a command the help is printed."""
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch)
    assert exc_info.value.code == 0
    assert "senulator" in capsys.readouterr().out
