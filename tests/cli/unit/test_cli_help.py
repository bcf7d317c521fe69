"""CLI smoke tests."""

from action_sequence_checker.cli import cli
from click.testing import CliRunner


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "check" in result.output
