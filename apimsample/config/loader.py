"""YAML config loader and dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from apimsample.config.schema import AppConfig

MASK = "***"


def load_config(path: str | Path) -> AppConfig:
    """Load and validate config from a YAML file.

    Missing required fields raise pydantic's ValidationError here, at
    startup, rather than on the first request.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**raw)


def get_config_value(config: AppConfig | dict, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.base_url'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, dict) and part in obj:
            obj = obj[part]
        elif isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def masked_dump(config: AppConfig) -> dict:
    """Config as a plain dict with credentials replaced by a mask."""
    data = config.model_dump(mode="json")
    for key in ("api_key", "bearer_token"):
        if data["api"].get(key):
            data["api"][key] = MASK
    return data
