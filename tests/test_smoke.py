"""Smoke tests: imports work, CLI --help works."""

from click.testing import CliRunner

from tree_ascii.__main__ import main


def test_import():
    import tree_ascii

    assert tree_ascii is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "text diagram" in result.output
    assert "--layout" in result.output
