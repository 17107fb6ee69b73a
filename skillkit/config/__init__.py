"""Configuration for skillkit."""

from .loader import ConfigError, default_config_path, load_config
from .schema import DEFAULT_EXCLUDED_DIRS, MANIFEST_NAME, SkillkitConfig, default_repo_dir

__all__ = [
    "ConfigError",
    "DEFAULT_EXCLUDED_DIRS",
    "MANIFEST_NAME",
    "SkillkitConfig",
    "default_config_path",
    "default_repo_dir",
    "load_config",
]
