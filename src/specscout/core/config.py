"""Configuration management for specscout.

Settings are resolved from, in increasing precedence: built-in defaults, an
optional YAML file (``detector:`` section), ``SPECSCOUT_*`` environment
variables (a ``.env`` file is honoured) and explicit overrides.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from ..version import __version__
from .errors import ConfigError
from .logging import get_logger

logger = get_logger(__name__)

# Environment variable name -> settings field
ENV_VARS = {
    "SPECSCOUT_DISCOVERY_TIMEOUT": "discovery_timeout",
    "SPECSCOUT_HEALTH_TIMEOUT": "health_timeout",
    "SPECSCOUT_MAX_BODY_BYTES": "max_body_bytes",
    "SPECSCOUT_USER_AGENT": "user_agent",
    "SPECSCOUT_LOG_LEVEL": "log_level",
}


class DetectorSettings(BaseModel):
    """Tunables for a detection request."""

    discovery_timeout: float = 10.0
    health_timeout: float = 5.0
    max_body_bytes: int = 5 * 1024 * 1024
    user_agent: str = f"specscout/{__version__}"
    log_level: str = "INFO"

    @field_validator("discovery_timeout", "health_timeout", "max_body_bytes")
    @classmethod
    def validate_positive(cls, v, info):
        """Timeouts and size limits must be positive."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive (got {v})")
        return v


def load_settings(
    config_path: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> DetectorSettings:
    """Build DetectorSettings from file, environment and overrides.

    Args:
        config_path: Optional YAML file with a ``detector:`` mapping
        overrides: Field values that take precedence over everything else

    Returns:
        Validated DetectorSettings

    Raises:
        ConfigError: If the file is missing or invalid, or a value is invalid

    Example:
        settings = load_settings(Path("specscout.yaml"), {"discovery_timeout": 5})
    """
    load_dotenv()

    values: dict[str, Any] = {}

    if config_path is not None:
        values.update(_load_config_file(config_path))

    for env_var, field_name in ENV_VARS.items():
        env_value = os.getenv(env_var)
        if env_value is not None and env_value != "":
            values[field_name] = env_value

    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = DetectorSettings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid detector settings: {e}") from e

    logger.debug(f"Loaded settings: {settings.model_dump()}")
    return settings


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Read the ``detector:`` section of a YAML config file."""
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw, dict):
        return {}

    section = raw.get("detector", {})
    if not isinstance(section, dict):
        raise ConfigError(f"'detector' section in {config_path} must be a mapping")

    unknown = set(section) - set(DetectorSettings.model_fields)
    if unknown:
        logger.warning(f"Ignoring unknown detector settings: {sorted(unknown)}")

    return {k: v for k, v in section.items() if k in DetectorSettings.model_fields}
