"""Configuration loader for run settings.

Provides a Config dataclass and a loader that reads from YAML files,
falling back to default values if no config file is specified or found.

Exports
-------
Config
load_config
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# Default config file path (next to this module)
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yml"


@dataclass
class OptimizerConfig:
    """Greedy search parameters."""

    # Number of pieces the target kcal is split into
    steps: int = 2000


@dataclass
class DisplayConfig:
    """Output options."""

    show_inputs: bool = True
    cost_precision: int = 6


@dataclass
class Config:
    """Root configuration container."""

    optimizer: OptimizerConfig = field(default_factory=OptimizerConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def _merge_dict_into_dataclass(data: dict[str, Any], dc_instance: Any) -> None:
    """Merge dictionary values into a dataclass instance."""
    for key, value in data.items():
        if hasattr(dc_instance, key):
            setattr(dc_instance, key, value)


def _is_int(value: Any) -> bool:
    # bool is an int subclass; YAML `yes` must not pass as a step count
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_config(config: Config) -> list[str]:
    """Validate config values and return list of errors."""
    errors: list[str] = []

    if not _is_int(config.optimizer.steps) or config.optimizer.steps < 1:
        errors.append("optimizer.steps must be an integer >= 1")

    if not isinstance(config.display.show_inputs, bool):
        errors.append("display.show_inputs must be true or false")
    if (
        not _is_int(config.display.cost_precision)
        or config.display.cost_precision < 0
    ):
        errors.append("display.cost_precision must be an integer >= 0")

    return errors


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from YAML file.

    Parameters
    ----------
    path : str | Path | None
        Path to config file (the `--config` option). If None, uses
        config.default.yml, or the defaults when that file is absent.

    Returns
    -------
    Config
        Loaded and validated configuration.

    Raises
    ------
    FileNotFoundError
        If specified path doesn't exist.
    OSError
        If the file exists but cannot be read.
    ValueError
        If config validation fails.
    """
    config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        # Fall back to defaults if default config doesn't exist
        return Config()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    # Build config from defaults, then overlay loaded values
    config = Config()

    if isinstance(data.get("optimizer"), dict):
        _merge_dict_into_dataclass(data["optimizer"], config.optimizer)
    if isinstance(data.get("display"), dict):
        _merge_dict_into_dataclass(data["display"], config.display)

    errors = _validate_config(config)
    if errors:
        raise ValueError(
            "Config validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    return config

