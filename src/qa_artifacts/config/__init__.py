"""Configuration defaults and loading."""

from qa_artifacts.config.loader import (
    get_home_config_path,
    get_local_config_path,
    load_config,
)
from qa_artifacts.config.schema import DEFAULT_CONFIG, TEXT_FIELDS, ArtifactConfig

__all__ = [
    "ArtifactConfig",
    "DEFAULT_CONFIG",
    "TEXT_FIELDS",
    "get_home_config_path",
    "get_local_config_path",
    "load_config",
]
