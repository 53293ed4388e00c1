"""
Locate and read the ``[recordstore]`` table of the TOML config.

Lookup order for the file: explicit ``path`` argument, the
``RECORDSTORE_CONFIG`` environment variable, then ``./config.toml``. A missing
file or table yields ``{}`` so settings fall back to environment variables.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict

DEFAULT_CONFIG_PATH = Path("config.toml")
CONFIG_PATH_ENV = "RECORDSTORE_CONFIG"
SECTION = "recordstore"


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    override = os.getenv(CONFIG_PATH_ENV, "").strip()
    return Path(override) if override else DEFAULT_CONFIG_PATH


def load_settings(path: str | Path | None = None) -> Dict[str, Any]:
    """Return the ``[recordstore]`` table, or ``{}`` when there is none."""

    target = resolve_config_path(path)
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        section = tomllib.load(handle).get(SECTION, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{SECTION}] in {target} must be a table")
    return section


__all__ = ["load_settings", "resolve_config_path", "CONFIG_PATH_ENV", "DEFAULT_CONFIG_PATH"]
