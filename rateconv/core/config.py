"""rateconv runtime configuration and settings."""
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rateconv.config.loader import ConfigLoader
from rateconv.core.logger import get_logger
from rateconv.models import InvalidOption

logger = get_logger(__name__)

ENV_VARS = {
    "decimal_places": "RATECONV_DECIMAL_PLACES",
    "output_rate": "RATECONV_OUTPUT_RATE",
    "verbose": "RATECONV_VERBOSE",
    "log_file": "RATECONV_LOG_FILE",
}

OPTION_NAMES = {
    "decimal_places": "--decimal-places",
    "output_rate": "OUTPUT_RATE",
    "verbose": "--verbose",
    "log_file": "--log-file",
}


class RateConvConfig(BaseModel):
    """Runtime configuration for a conversion.

    Attributes:
        decimal_places: Digits after the decimal point in the result (default: 2)
        output_rate: Output units used when none are given (default: kB/s)
        verbose: Print long-form unit names (default: False)
        log_file: Also write logs to this file (default: off)
    """

    model_config = ConfigDict(extra='forbid')

    decimal_places: int = Field(2, ge=0, description="Digits after the decimal point")
    output_rate: str = Field("kB/s", description="Default output units")
    verbose: bool = Field(False, description="Print long-form unit names")
    log_file: Optional[str] = Field(None, description="Optional log file path")

    @field_validator('output_rate')
    @classmethod
    def validate_output_rate(cls, v):
        """Reject blank output units."""
        if not v.strip():
            raise ValueError("Output rate must not be empty")
        return v.strip()

    @classmethod
    def from_values(cls, values: Dict[str, Any], origin: str) -> "RateConvConfig":
        """Validate raw settings, reporting failures as InvalidOption.

        Args:
            values: Raw setting values
            origin: Where the values came from, for error messages

        Raises:
            InvalidOption: If any value fails validation
        """
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise _invalid_option(e, origin) from e

    @classmethod
    def from_env(cls, base: Optional[Dict[str, Any]] = None) -> "RateConvConfig":
        """Create config from environment variables layered over ``base``.

        Environment variables:
            RATECONV_DECIMAL_PLACES: Digits after the decimal point
            RATECONV_OUTPUT_RATE: Default output units
            RATECONV_VERBOSE: Long-form output (1/true/yes)
            RATECONV_LOG_FILE: Log file path
        """
        values = dict(base or {})
        for field, env_var in ENV_VARS.items():
            value = os.getenv(env_var)
            if value is not None:
                values[field] = value
        return cls.from_values(values, origin="environment")

    def with_overrides(self, **overrides: Any) -> "RateConvConfig":
        """Return a copy with command-line values applied (None means unset)."""
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return self.from_values(values, origin="command line")


def _invalid_option(error: ValidationError, origin: str) -> InvalidOption:
    details = error.errors()[0]
    field = str(details["loc"][0]) if details["loc"] else "settings"
    value = details.get("input")

    if details["type"] == "extra_forbidden":
        return InvalidOption(f"Unknown setting '{field}' in {origin}", token=field, source=origin)

    if origin == "command line":
        name = OPTION_NAMES.get(field, field)
    elif origin == "environment":
        name = ENV_VARS.get(field, field)
    else:
        name = field

    return InvalidOption(
        f"Invalid value {value!r} for {name} in {origin}: {details['msg']}",
        token=str(value),
        source=origin,
    )


def load_config(config_path: Optional[str] = None) -> RateConvConfig:
    """Build settings from the config file (if any) and the environment.

    Args:
        config_path: YAML file to read; None skips the file layer

    Raises:
        FileNotFoundError: If ``config_path`` does not exist
        InvalidOption: If the file or environment holds invalid values
    """
    values: Dict[str, Any] = {}
    if config_path:
        values = ConfigLoader(config_path).load()
        logger.debug(f"Loaded settings from {config_path}: {values}")
        values = RateConvConfig.from_values(values, origin=f"config file {config_path}").model_dump()

    return RateConvConfig.from_env(values)
