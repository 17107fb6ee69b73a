"""Load skillkit configuration from disk and the environment."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from .schema import SkillkitConfig

ENV_STORE_DIR = "SKILLKIT_STORE_DIR"
ENV_REPO_DIR = "SKILLKIT_REPO_DIR"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or validated."""
    def __init__(self, message: str, errors: Optional[list[str]] = None):
        self.errors = errors or []
        super().__init__(message)


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return Path(base) / "skillkit" / "config.json"


def _read_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def load_config(
    path: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> SkillkitConfig:
    """Build the configuration.

    Later sources win: the JSON file, then ``SKILLKIT_STORE_DIR`` /
    ``SKILLKIT_REPO_DIR``, then explicit ``overrides`` (CLI flags).
    ``None`` values in ``overrides`` are ignored.
    """
    config_path = path or default_config_path()
    data = _read_file(config_path)

    if os.environ.get(ENV_STORE_DIR):
        data["store_dir"] = os.environ[ENV_STORE_DIR]
    if os.environ.get(ENV_REPO_DIR):
        data["repo_dir"] = os.environ[ENV_REPO_DIR]

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        return SkillkitConfig(**data)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field = '.'.join(str(x) for x in error['loc'])
            errors.append(f"{field}: {error['msg']}")
        raise ConfigError(
            f"Invalid configuration in {config_path}: {'; '.join(errors)}",
            errors,
        ) from e
