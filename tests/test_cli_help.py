"""Tests for CLI help output."""
from rateconv.cli import app


def test_main_help(runner):
    """Help lists the positional rates and the main options."""
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    output = result.stdout

    assert "INPUT_RATE" in output
    assert "OUTPUT_RATE" in output
    assert "--verbose" in output
    assert "--decimal-places" in output
    assert "--list-units" in output


def test_missing_input_rate(runner):
    """Running without arguments is a usage error."""
    result = runner.invoke(app, [])

    assert result.exit_code != 0
