"""Configuration management module."""

import copy
import os
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
import yaml


# cosine_lab/utils/config.py -> cosine_lab/utils -> cosine_lab -> root
PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "cosine_lab.yaml"

DEFAULTS: Dict[str, Any] = {
    "server": {
        "host": "0.0.0.0",
        "port": 8001,
    },
    "logging": {
        "level": "INFO",
        "log_dir": "./logs",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
    "llm": {
        "model": None,
        "base_url": None,
        "timeout": 60,
        "temperature": 0.7,
    },
    "ai": {
        "default_dimensions": 2,
        "allowed_dimensions": [2, 3, 5],
    },
    "chart": {
        "size_2d": 300,
        "size_3d": 320,
        "initial_pitch": -20.0,
        "initial_yaw": 45.0,
        "drag_sensitivity": 0.5,
    },
}

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Config:
    """Configuration class for accessing YAML config values."""

    def __init__(self, config_dict: Dict[str, Any]):
        self._config = config_dict

    def __getattr__(self, name: str) -> Any:
        """Allow attribute-style access to config values."""
        if name.startswith("_"):
            raise AttributeError(name)
        value = self._config.get(name)
        if isinstance(value, dict):
            return Config(value)
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value with optional default."""
        return self._config.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config back to dictionary."""
        return self._config


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from YAML file on top of the built-in defaults.

    Args:
        config_path: Path to the YAML configuration file. When omitted the
            project's config/cosine_lab.yaml is used if it exists, otherwise
            the defaults alone.

    Returns:
        Config object with loaded configuration

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If the file does not contain a mapping
        yaml.YAMLError: If config file is invalid
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return Config(copy.deepcopy(DEFAULTS))
        config_path = DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f) or {}

    if not isinstance(config_dict, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")

    unknown_sections = [s for s in config_dict if s not in DEFAULTS]
    if unknown_sections:
        raise ValueError(f"Unknown config sections: {unknown_sections}")

    return Config(_merge(DEFAULTS, config_dict))


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration values.

    Args:
        config: Config object to validate

    Returns:
        List of warning messages (empty if all valid)
    """
    warnings = []

    # Logging
    if str(config.logging.level).upper() not in VALID_LOG_LEVELS:
        warnings.append(f"Unknown log level '{config.logging.level}', INFO will be used")
    log_dir = config.logging.log_dir
    if log_dir and not os.path.exists(log_dir):
        warnings.append(f"Log directory will be created: {log_dir}")

    # LLM
    if config.llm.timeout is not None and config.llm.timeout < 5:
        warnings.append("LLM timeout < 5 seconds may be too short")
    temperature = config.llm.temperature
    if temperature is not None and not 0.0 <= temperature <= 2.0:
        warnings.append("LLM temperature should be between 0.0 and 2.0")

    # AI
    allowed = config.ai.allowed_dimensions or []
    if config.ai.default_dimensions not in allowed:
        warnings.append(
            f"ai.default_dimensions={config.ai.default_dimensions} "
            f"is not in allowed_dimensions {allowed}"
        )

    # Chart
    for key in ("size_2d", "size_3d"):
        if config.chart.get(key, 0) <= 0:
            warnings.append(f"chart.{key} must be positive")
    if config.chart.drag_sensitivity == 0:
        warnings.append("chart.drag_sensitivity is 0, 3D rotation is disabled")

    return warnings
