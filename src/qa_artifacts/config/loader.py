"""Configuration file loading and merging."""

import logging
from datetime import date
from pathlib import Path

import yaml

from qa_artifacts.config.schema import DEFAULT_CONFIG, ArtifactConfig

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".qa-artifacts"
CONFIG_FILENAME = "config.yaml"

# Settings that only the command line may set
CLI_ONLY_KEYS: tuple[str, ...] = ("force", "out")

_SCALAR_TYPES = (str, int, float, bool, date)


def get_home_config_path() -> Path:
    """Get path to global defaults: ~/.qa-artifacts/config.yaml."""
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def get_local_config_path() -> Path:
    """Get path to project defaults: ./.qa-artifacts/config.yaml."""
    return Path.cwd() / CONFIG_DIRNAME / CONFIG_FILENAME


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Load a YAML defaults file, return None if not found, empty or invalid."""
    if not path.exists():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        return None
    result: dict[str, object] = data
    return result


def _file_defaults(data: dict[str, object], path: Path) -> dict[str, object]:
    """Keep the scalar values a config file may set, warning about the rest."""
    values: dict[str, object] = {}
    for key, value in data.items():
        if key in CLI_ONLY_KEYS:
            logger.warning("Ignoring '%s' in %s: use --%s instead", key, path, key)
            continue
        if not isinstance(key, str):
            logger.warning("Ignoring non-string key %r in %s", key, path)
            continue
        if value is not None and not isinstance(value, _SCALAR_TYPES):
            logger.warning("Ignoring non-scalar value for '%s' in %s", key, path)
            continue
        values[key] = value
    return values


def load_config() -> ArtifactConfig:
    """Load merged default configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.qa-artifacts/config.yaml)
    3. Local config (./.qa-artifacts/config.yaml)

    Command-line options are applied on top by the option resolver.
    """
    config = DEFAULT_CONFIG

    for path in (get_home_config_path(), get_local_config_path()):
        data = load_yaml_config(path)
        if data:
            logger.debug("Applying config defaults from %s", path)
            config = config.merge(_file_defaults(data, path))

    return config