"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, skillmgr.toml only contains
overrides. A fresh data directory needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

# --- skillmgr.toml sections ---


class StorageConfig(BaseModel):
    """[storage] section.

    ``data_dir`` may be relative; it is resolved against the directory of
    the config file (or CWD when there is none).
    """

    model_config = {"frozen": True}

    data_dir: Path = Path(".")
    skills_file: str = "skills.json"
    projects_file: str = "projects.json"
    employees_file: str = "employees.json"
    default_page_size: int = Field(default=10, ge=0)


class ServerConfig(BaseModel):
    """[server] section.

    ``checkpoint`` selects when the HTTP server writes snapshots:
    ``"mutation"`` after every successful mutating request, ``"shutdown"``
    only on graceful shutdown. Both flush on shutdown.
    """

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 8080
    checkpoint: Literal["mutation", "shutdown"] = "mutation"

