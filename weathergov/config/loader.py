"""YAML config loader and copy-on-update helpers."""

from pathlib import Path
from typing import Any

import yaml

from weathergov.config.schema import ClientConfig


def load_config(path: str | Path) -> ClientConfig:
    """Load and validate client config from a YAML file.

    An empty file yields the defaults.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return ClientConfig(**raw)


def update_config(config: ClientConfig, **changes: Any) -> ClientConfig:
    """Apply changes and re-validate.

    Returns a new ClientConfig instance; the original is left untouched.
    """
    data = config.model_dump()
    unknown = set(changes) - set(data)
    if unknown:
        raise KeyError(f"Config key not found: {', '.join(sorted(unknown))}")
    data.update(changes)
    return ClientConfig(**data)
