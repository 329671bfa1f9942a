"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SKILLMGR_*`` prefix (``__`` for nested sections)
  3. TOML file    — ``skillmgr.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`skillmgr.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from skillmgr.config.discovery import find_config, resolve_data_dir
from skillmgr.config.models import ServerConfig, StorageConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``skillmgr.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class SkillMgrSettings(BaseSettings):
    """Unified settings for the skillmgr CLI and HTTP server.

    Attributes:
        root: Directory relative storage paths are anchored at (parent of
            ``skillmgr.toml``, or CWD if no config found).
        config_path: The TOML file in effect, or None.
        data_dir: ``--data-dir`` override; wins over ``[storage] data_dir``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SKILLMGR_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved paths (not in TOML — derived from config location) ---
    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    data_dir: Path | None = None

    # --- CLI flags ---
    table: bool = False
    envelope: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    storage: StorageConfig = Field(default_factory=StorageConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> SkillMgrSettings:
        """Construct settings from a CLI invocation.

        Discovers ``skillmgr.toml`` via walk-up (or explicit *config_path*),
        resolves *root* from the config file's parent directory, and merges
        CLI flags as highest-priority overrides. Flags passed as None are
        dropped so they do not mask env or TOML values.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        flags = {key: value for key, value in cli_flags.items() if value is not None}
        _tls.toml_path = toml_path
        try:
            return cls(root=resolved_root, config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

    # ------------------------------------------------------------------
    # Storage paths
    # ------------------------------------------------------------------

    @property
    def data_root(self) -> Path:
        """The directory holding the three snapshot files."""
        if self.data_dir is not None:
            return resolve_data_dir(self.data_dir, Path.cwd())
        return resolve_data_dir(self.storage.data_dir, self.root)

    def store_paths(self) -> dict[str, Path]:
        """Snapshot file per store name."""
        root = self.data_root
        return {
            "skills": root / self.storage.skills_file,
            "projects": root / self.storage.projects_file,
            "employees": root / self.storage.employees_file,
        }
