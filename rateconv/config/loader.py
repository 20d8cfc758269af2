"""YAML settings file loading."""
from pathlib import Path
from typing import Any, Dict

import yaml

from rateconv.models import InvalidOption


class ConfigLoader:
    """Reads a rateconv YAML settings file.

    Example file:

        decimal_places: 3
        output_rate: MB/s
        verbose: true
    """

    def __init__(self, config_path: str):
        self.config_path = Path(config_path).expanduser()
        self.raw_config = None

    def load(self) -> Dict[str, Any]:
        """Load YAML settings from file.

        Returns:
            Mapping of setting name to raw value (empty for an empty file)

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidOption: If the file is unreadable, not valid YAML or not a mapping
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self.raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidOption(
                f"Could not parse config file {self.config_path}: {e}",
                token=str(self.config_path),
                source="config file",
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            # Directories, unreadable files and non UTF-8 content
            raise InvalidOption(
                f"Could not read config file {self.config_path}: {e}",
                token=str(self.config_path),
                source="config file",
            ) from e

        # Handle empty config file
        if self.raw_config is None:
            return {}

        if not isinstance(self.raw_config, dict):
            raise InvalidOption(
                f"Config file {self.config_path} must contain a mapping of settings",
                token=str(self.config_path),
                source="config file",
            )

        return dict(self.raw_config)
