"""Configuration loading utilities."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR = Path(__file__).parent


@lru_cache
def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML mapping from the config/ directory.

    Results are cached per filename; callers must not mutate them.
    """
    config_path = CONFIG_DIR / filename
    with open(config_path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{filename} must contain a mapping, got {type(data).__name__}")
    return data
