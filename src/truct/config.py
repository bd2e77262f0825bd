"""Project configuration for truct (``truct.yml``)."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

CONFIG_FILE = "truct.yml"
DEFAULT_SCRIPT = "build.py"


class ConfigError(RuntimeError):
    """Raised when ``truct.yml`` exists but cannot be used."""


@dataclass
class ProjectConfig:
    """Settings read from the optional project file."""
    script: str = DEFAULT_SCRIPT
    optimized: bool = False


def load_config(base_dir: Optional[Union[str, Path]] = None) -> ProjectConfig:
    """Load ``truct.yml`` from ``base_dir`` (default: the working directory).

    A missing file yields the defaults. Unknown keys are ignored.

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds values
            of the wrong type.
    """
    config_path = Path(base_dir or ".") / CONFIG_FILE
    if not config_path.exists():
        return ProjectConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read {CONFIG_FILE}: {e}") from e

    if data is None:
        return ProjectConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE} must contain a mapping, got {type(data).__name__}")

    config = ProjectConfig()
    if 'script' in data:
        script = data['script']
        if not isinstance(script, str) or not script.strip():
            raise ConfigError("'script' must be a non-empty string")
        config.script = script
    if 'optimized' in data:
        optimized = data['optimized']
        if not isinstance(optimized, bool):
            raise ConfigError("'optimized' must be true or false")
        config.optimized = optimized
    return config
