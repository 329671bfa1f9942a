"""Workspace — the application context holding every store.

The Workspace is the single dependency injected into every service. It is
constructed once at startup (CLI invocation or HTTP server) and passed by
reference; there are no module-level stores.

Checkpointing is explicit: :meth:`Workspace.save` writes the stores that
changed since they were loaded or last saved. Nothing is flushed from a
finalizer or on scope exit; each adapter calls ``save()`` at its own
checkpoints (end of a CLI command, after a mutating HTTP request, server
shutdown).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from skillmgr.domain.models import Employee, Project, Skill
from skillmgr.infrastructure.snapshot import FileBackedStore
from skillmgr.infrastructure.store import EntityStore

if TYPE_CHECKING:
    from pathlib import Path

    from skillmgr.config.settings import SkillMgrSettings

logger = logging.getLogger(__name__)

# Fixed global lock order for operations touching two stores.
LOCK_ORDER: tuple[str, ...] = ("employees", "projects", "skills")


class Workspace:
    """Named handles to the skill, project, and employee stores.

    The backend is chosen at construction: :meth:`open` binds each store to
    its snapshot file, :meth:`in_memory` keeps everything in process.
    """

    def __init__(
        self,
        *,
        skills: EntityStore[Skill],
        projects: EntityStore[Project],
        employees: EntityStore[Employee],
        default_page_size: int | None = 10,
    ) -> None:
        self.skills = skills
        self.projects = projects
        self.employees = employees
        self.default_page_size = default_page_size

    @classmethod
    def in_memory(cls, *, default_page_size: int | None = 10) -> Workspace:
        """A workspace with no files behind it; :meth:`save` is a no-op."""
        return cls(
            skills=EntityStore(Skill),
            projects=EntityStore(Project),
            employees=EntityStore(Employee),
            default_page_size=default_page_size,
        )

    @classmethod
    def open(cls, settings: SkillMgrSettings) -> Workspace:
        """Load all three stores from the paths configured in *settings*.

        Raises PersistenceError if any existing snapshot is malformed.
        """
        paths = settings.store_paths()
        workspace = cls(
            skills=FileBackedStore.open(paths["skills"], Skill),
            projects=FileBackedStore.open(paths["projects"], Project),
            employees=FileBackedStore.open(paths["employees"], Employee),
            default_page_size=settings.storage.default_page_size,
        )
        logger.debug("Opened workspace at %s", settings.data_root)
        return workspace

    # ------------------------------------------------------------------
    # Store access
    # ------------------------------------------------------------------

    def stores(self) -> dict[str, EntityStore]:
        """All stores keyed by name, in :data:`LOCK_ORDER`."""
        by_name: dict[str, EntityStore] = {
            "employees": self.employees,
            "projects": self.projects,
            "skills": self.skills,
        }
        return {name: by_name[name] for name in LOCK_ORDER}

    @property
    def dirty(self) -> bool:
        return any(isinstance(s, FileBackedStore) and s.dirty for s in self.stores().values())

    # ------------------------------------------------------------------
    # Checkpoint
    # ------------------------------------------------------------------

    def save(self) -> list[Path]:
        """Write every file-backed store with unsaved changes.

        Returns the paths written. Raises PersistenceError on I/O failure;
        stores saved before the failure stay saved.
        """
        written: list[Path] = []
        for name, store in self.stores().items():
            if isinstance(store, FileBackedStore) and store.dirty:
                store.save()
                written.append(store.path)
                logger.debug("Checkpoint wrote %s store to %s", name, store.path)
        return written
