"""Shared test fixtures for rateconv tests."""
import pytest
from typer.testing import CliRunner

from rateconv import cli_support
from rateconv.core.config import ENV_VARS
from rateconv.core.logger import close_file_logging


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep user config files and RATECONV_* variables out of every test."""
    for env_var in list(ENV_VARS.values()) + ["RATECONV_CONFIG"]:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli_support, "CONFIG_PATHS", [str(tmp_path / "rateconv.yml")])
    yield
    close_file_logging()


@pytest.fixture
def runner():
    """Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML settings file and return its path."""
    def _write(content: str, name: str = "settings.yml"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
