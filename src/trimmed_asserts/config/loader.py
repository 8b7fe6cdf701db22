from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from .models import TrimConfig

CONFIG_ENV_VAR = "TRIMMED_ASSERTS_CONFIG"


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_config(path: Path) -> TrimConfig:
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    return TrimConfig.model_validate(_load_yaml(path))


@lru_cache(maxsize=1)
def default_config() -> TrimConfig:
    """Process-wide settings, read once from $TRIMMED_ASSERTS_CONFIG when it is set."""
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        return load_config(Path(config_path))
    return TrimConfig()
