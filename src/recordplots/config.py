from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULT_CONFIG_PATH = Path("config.yaml")


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with open(cfg_path, "r") as f:
        cfg = yaml.safe_load(f) or {}
    for section in ("paths", "data"):
        if section not in cfg:
            raise ValueError(f"Config {cfg_path} is missing the '{section}' section.")
    return cfg


__all__ = ["load_config", "DEFAULT_CONFIG_PATH"]
