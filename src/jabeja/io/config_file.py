"""YAML configuration files."""

from __future__ import annotations
from pathlib import Path
from typing import Any

import yaml

from jabeja.core.config import JabejaConfig


def load_config(path: str | Path, overrides: dict[str, Any] | None = None) -> JabejaConfig:
    """
    Load a JabejaConfig from a YAML mapping.

    Keys in `overrides` whose value is not None replace file values.
    """
    with Path(path).open() as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of config keys")
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return JabejaConfig.from_dict(data)
