"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from action_sequence_checker.cli import cli, main
from click.testing import CliRunner


def _write_config(tmp_path: Path, check: dict, events: list[dict] | None = None) -> Path:
    config: dict[str, object] = {"check": check}
    if events is not None:
        config["recorded_events"] = {"inline": events}
    path = tmp_path / "check.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def test_check_command_reports_pass(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(
        tmp_path,
        {"mode": "contains", "expected": [{"type": "X"}, {"type": "Z"}]},
        [{"type": "X"}, {"type": "Y"}, {"type": "Z"}],
    )

    result = runner.invoke(cli, ["check", "--config", str(config_path)])

    assert result.exit_code == 0
    assert result.output.startswith("PASS:")


def test_check_command_reports_failure_on_stderr(tmp_path: Path, capsys) -> None:
    config_path = _write_config(
        tmp_path,
        {"expected": [{"type": "X"}, {"type": "Z"}]},
        [{"type": "X"}, {"type": "Y"}, {"type": "Z"}],
    )

    exit_code = main(["check", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "FAIL: dispatched actions do not match: at position 1" in captured.err
    assert "Traceback" not in captured.err


def test_check_command_uses_events_file(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path, {"target": "types", "expected": ["A", "B"]})
    events_path = tmp_path / "events.yaml"
    events_path.write_text("- type: A\n- type: B\n", encoding="utf-8")

    exit_code = main(["check", "--config", str(config_path), "--events", str(events_path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "PASS: 2 expectations satisfied by 2 events" in captured.out


def test_check_command_returns_error_for_invalid_config(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "invalid.json"
    config_path.write_text(json.dumps({"check": {"mode": "fuzzy"}}), encoding="utf-8")

    result = runner.invoke(cli, ["check", "--config", str(config_path)])

    assert result.exit_code != 0
    assert "check.mode must be one of" in str(result.exception)


def test_generate_config_command_writes_placeholder_file_with_default_name(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("check.yaml").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        content = output_path.read_text(encoding="utf-8")
        assert "recorded_events:" in content
        assert "check:" in content
        assert "<REQUIRED>" in content
        assert str(output_path) in result.output


def test_generate_config_command_fails_when_output_file_already_exists(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "check.yaml"
    output_path.write_text("already-there", encoding="utf-8")

    result = runner.invoke(
        cli,
        [
            "generate-config",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code != 0
    assert "already exists" in str(result.exception).lower()
    assert output_path.read_text(encoding="utf-8") == "already-there"


def test_verbose_flag_is_accepted(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path, {"expected": []}, [])

    result = runner.invoke(cli, ["--verbose", "check", "--config", str(config_path)])

    assert result.exit_code == 0
