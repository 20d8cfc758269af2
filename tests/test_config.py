"""Tests for settings loading and validation."""
import pytest

from rateconv import cli_support
from rateconv.cli_support import find_config
from rateconv.config import ConfigLoader
from rateconv.core.config import RateConvConfig, load_config
from rateconv.models import InvalidOption


class TestLoadConfig:
    """Test layering of defaults, config file and environment."""

    def test_defaults(self):
        config = load_config()

        assert config.decimal_places == 2
        assert config.output_rate == "kB/s"
        assert config.verbose is False
        assert config.log_file is None

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("RATECONV_DECIMAL_PLACES", "4")
        monkeypatch.setenv("RATECONV_VERBOSE", "true")
        monkeypatch.setenv("RATECONV_OUTPUT_RATE", "MB/s")

        config = load_config()

        assert config.decimal_places == 4
        assert config.verbose is True
        assert config.output_rate == "MB/s"

    def test_config_file(self, write_config):
        path = write_config("decimal_places: 3\noutput_rate: mb/hr\n")

        config = load_config(str(path))

        assert config.decimal_places == 3
        assert config.output_rate == "mb/hr"

    def test_environment_wins_over_file(self, write_config, monkeypatch):
        path = write_config("decimal_places: 3\n")
        monkeypatch.setenv("RATECONV_DECIMAL_PLACES", "5")

        assert load_config(str(path)).decimal_places == 5

    def test_unknown_setting_in_file(self, write_config):
        path = write_config("colour: blue\n")

        with pytest.raises(InvalidOption, match="Unknown setting 'colour'"):
            load_config(str(path))

    def test_negative_decimal_places_in_file(self, write_config):
        path = write_config("decimal_places: -1\n")

        with pytest.raises(InvalidOption) as exc_info:
            load_config(str(path))

        assert "decimal_places" in str(exc_info.value)
        assert "config file" in str(exc_info.value)

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("RATECONV_DECIMAL_PLACES", "abc")

        with pytest.raises(InvalidOption) as exc_info:
            load_config()

        assert "RATECONV_DECIMAL_PLACES" in str(exc_info.value)
        assert exc_info.value.token == "abc"

    def test_directory_path(self, tmp_path):
        with pytest.raises(InvalidOption, match="Could not read config file"):
            ConfigLoader(str(tmp_path)).load()

    def test_non_utf8_content(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_bytes(b"\xff\xfe verbose: true\n")

        with pytest.raises(InvalidOption, match="Could not read config file"):
            ConfigLoader(str(path)).load()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yml"))


class TestOverrides:
    """Test command-line overrides."""

    def test_override_values(self):
        config = RateConvConfig().with_overrides(decimal_places="5", verbose=True)

        assert config.decimal_places == 5
        assert config.verbose is True

    def test_none_keeps_existing_value(self):
        config = RateConvConfig(decimal_places=3).with_overrides(decimal_places=None, log_file=None)

        assert config.decimal_places == 3

    @pytest.mark.parametrize("value", ["-1", "two", "1.5"])
    def test_invalid_decimal_places(self, value):
        with pytest.raises(InvalidOption) as exc_info:
            RateConvConfig().with_overrides(decimal_places=value)

        assert "--decimal-places" in str(exc_info.value)
        assert exc_info.value.source == "command line"

    def test_blank_output_rate(self):
        with pytest.raises(InvalidOption, match="must not be empty"):
            RateConvConfig().with_overrides(output_rate="  ")


class TestConfigLoader:
    """Test YAML file reading."""

    def test_empty_file(self, write_config):
        assert ConfigLoader(str(write_config(""))).load() == {}

    def test_not_a_mapping(self, write_config):
        with pytest.raises(InvalidOption, match="must contain a mapping"):
            ConfigLoader(str(write_config("- 1\n- 2\n"))).load()

    def test_invalid_yaml(self, write_config):
        with pytest.raises(InvalidOption, match="Could not parse config file"):
            ConfigLoader(str(write_config("decimal_places: [\n"))).load()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            ConfigLoader(str(tmp_path / "nope.yml")).load()


class TestFindConfig:
    """Test settings file discovery."""

    def test_explicit_path(self):
        assert find_config("custom.yml") == "custom.yml"

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv("RATECONV_CONFIG", "/tmp/from-env.yml")
        assert find_config() == "/tmp/from-env.yml"

    def test_search_paths(self, tmp_path, monkeypatch):
        path = tmp_path / "found.yml"
        path.write_text("verbose: true\n")
        monkeypatch.setattr(cli_support, "CONFIG_PATHS", [str(tmp_path / "absent.yml"), str(path)])

        assert find_config() == str(path)

    def test_nothing_found(self):
        assert find_config() is None
