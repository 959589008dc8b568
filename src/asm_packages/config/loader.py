"""YAML configuration file loading with Pydantic validation."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from asm_packages.errors import ConfigError

from .models import AsmSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "asm-packages.yaml"


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ConfigError(f"Expected a mapping at the top of {path}")
            return data
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def load_settings(project_root: Path, config_path: Optional[Path] = None) -> AsmSettings:
    """Build settings for a Unity project.

    An explicit ``config_path`` must exist. Without one, ``asm-packages.yaml``
    in the project root is used when present, otherwise defaults apply.

    Args:
        project_root: Root directory of the Unity project.
        config_path: Optional explicit configuration file.

    Returns:
        Validated settings with ``project_root`` set.

    Raises:
        ConfigError: If the file is unreadable or fails validation.
    """
    if config_path is None:
        candidate = project_root / DEFAULT_CONFIG_NAME
        config_path = candidate if candidate.is_file() else None

    data: dict = {}
    if config_path is not None:
        data = load_yaml(config_path)
        logger.debug(f"Loaded configuration from {config_path}")

    data["project_root"] = project_root
    try:
        return AsmSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {config_path}: {e}") from e
