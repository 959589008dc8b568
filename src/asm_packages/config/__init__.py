"""Configuration models and loading."""

from .loader import DEFAULT_CONFIG_NAME, load_settings, load_yaml
from .models import AsmSettings

__all__ = ["AsmSettings", "DEFAULT_CONFIG_NAME", "load_settings", "load_yaml"]
