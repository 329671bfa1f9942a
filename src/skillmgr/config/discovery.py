"""Config file discovery and data-directory resolution.

Walk-up finder locates skillmgr.toml, similar to how git finds .git/.
The SKILLMGR_CONFIG env var and the --config CLI flag override the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "skillmgr.toml"
CONFIG_ENV_VAR = "SKILLMGR_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for skillmgr.toml.

    Returns the path to the config file, or None if not found. An env var
    pointing at a missing file disables discovery instead of falling back.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_data_dir(data_dir: Path, base: Path) -> Path:
    """Anchor a relative *data_dir* at *base*; absolute paths pass through."""
    expanded = data_dir.expanduser()
    if expanded.is_absolute():
        return expanded
    return base / expanded
