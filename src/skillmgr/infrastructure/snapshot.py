"""Snapshot persistence — one JSON document per store.

File format: a pretty-printed JSON object mapping each record id to the
record, in the store's enumeration order::

    {
      "1b4e28ba-2fa1-11d2-883f-0016d3cca427": {
        "id": "1b4e28ba-2fa1-11d2-883f-0016d3cca427",
        "label": "Rust"
      }
    }

Loading a missing file yields an empty store (first run). A file that exists
but cannot be read or parsed is fatal: :class:`PersistenceError`, no
best-effort recovery.

Saving replaces the whole document in place. There is no write-ahead log
and no atomic rename; a crash mid-write can leave a truncated file.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, TypeVar

import pydantic
from pydantic import TypeAdapter

from skillmgr.domain.errors import PersistenceError
from skillmgr.domain.models import Record
from skillmgr.infrastructure.store import EntityStore

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


# ---------------------------------------------------------------------------
# Document codec
# ---------------------------------------------------------------------------


def read_records(path: Path, record_type: type[R]) -> list[R]:
    """Parse the snapshot at *path* into records, in file order.

    Returns an empty list when *path* does not exist.
    """
    if not path.exists():
        logger.debug("No snapshot at %s, starting empty", path)
        return []

    try:
        data = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read snapshot {path}: {exc}"
        raise PersistenceError(msg, path=str(path)) from exc
    try:
        raw = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Malformed snapshot {path}: not valid UTF-8 at byte {exc.start}"
        raise PersistenceError(msg, path=str(path)) from exc

    adapter = TypeAdapter(dict[str, record_type])  # type: ignore[valid-type]
    try:
        by_key = adapter.validate_json(raw)
    except pydantic.ValidationError as exc:
        msg = f"Malformed snapshot {path}: {exc.error_count()} error(s), first: {_first_error(exc)}"
        raise PersistenceError(msg, path=str(path)) from exc

    records: list[R] = []
    for key, record in by_key.items():
        if key != str(record.id):
            msg = f"Malformed snapshot {path}: key {key!r} does not match record id {record.id}"
            raise PersistenceError(msg, path=str(path))
        records.append(record)
    return records


def render_records(records: Iterable[Record]) -> str:
    """Render *records* as the pretty-printed snapshot document."""
    document = {str(record.id): record.model_dump(mode="json") for record in records}
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def _first_error(exc: pydantic.ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err.get('msg', '')}" if loc else str(err.get("msg", ""))


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------


def load_snapshot(path: Path, record_type: type[R]) -> EntityStore[R]:
    """Load a store's full contents from *path*."""
    records = read_records(path, record_type)
    logger.debug("Loaded %d %s record(s) from %s", len(records), record_type.__name__, path)
    return EntityStore(record_type, records)


def save_snapshot(path: Path, store: EntityStore[R]) -> None:
    """Serialize the entire *store* and overwrite *path*.

    The store lock is held while the document is rendered so a concurrent
    mutation cannot produce a half-updated snapshot.
    """
    with store.locked():
        document = render_records(store.snapshot())
        count = len(store)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document, encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write snapshot {path}: {exc}"
        raise PersistenceError(msg, path=str(path)) from exc
    logger.debug("Saved %d %s record(s) to %s", count, store.name, path)


# ---------------------------------------------------------------------------
# File-backed backend
# ---------------------------------------------------------------------------


class FileBackedStore(EntityStore[R]):
    """An :class:`EntityStore` bound to its snapshot file.

    Tracks whether it has unsaved mutations so a checkpoint only rewrites
    the files that changed. Nothing is written implicitly: callers decide
    when to :meth:`save`.
    """

    def __init__(self, record_type: type[R], path: Path, records: Iterable[R] = ()) -> None:
        super().__init__(record_type, records)
        self.path = path
        self._saved_revision = self.revision

    @classmethod
    def open(cls, path: Path, record_type: type[R]) -> FileBackedStore[R]:
        """Load the store at *path* (empty if the file does not exist)."""
        records = read_records(path, record_type)
        logger.debug("Opened %s with %d record(s)", path, len(records))
        return cls(record_type, path, records)

    @property
    def dirty(self) -> bool:
        """True when the store changed since it was loaded or last saved."""
        return self.revision != self._saved_revision

    def save(self) -> None:
        """Write the full store to its file (whole-document replace)."""
        with self.locked():
            revision = self.revision
            save_snapshot(self.path, self)
            self._saved_revision = revision
