"""Config file loading — ``.markdowndown.yml`` in the project or home directory."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from markdowndown.core.errors import ConfigError
from markdowndown.core.models import AppConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".markdowndown.yml"


def _candidate_paths() -> list[Path]:
    return [Path.cwd() / CONFIG_FILENAME, Path.home() / CONFIG_FILENAME]


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load configuration, falling back to defaults when no file exists.

    An explicit *path* must exist. Without one the current directory is tried
    first, then the home directory.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        config_path = next((p for p in _candidate_paths() if p.is_file()), None)
        if config_path is None:
            return AppConfig()

    logger.debug("Loading config from %s", config_path)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not read {config_path}: {exc}") from exc

    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
