"""EntityStore — keyed in-memory collection with generated identifiers.

One store exists per root entity kind (skills, projects, employees). A store
owns no other store; joins across stores live in
:mod:`skillmgr.services.composition`.

Capabilities are expressed as small protocols so callers can ask for only
what they use (the composition layer needs ``get`` on the referenced store,
nothing more). :class:`EntityStore` is the in-memory backend;
:class:`~skillmgr.infrastructure.snapshot.FileBackedStore` adds a file.

INVARIANT: Enumeration order is insertion order. ``find`` pages over it,
and snapshots are written and read back in the same order.

INVARIANT: Every public operation is one critical section on the store's
lock. ``locked()`` lets a caller extend the section across several calls.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from skillmgr.domain.errors import ValidationError
from skillmgr.domain.ids import new_id
from skillmgr.domain.models import Record

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from contextlib import AbstractContextManager
    from uuid import UUID

    from pydantic import BaseModel

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)
R_co = TypeVar("R_co", bound=Record, covariant=True)


# ---------------------------------------------------------------------------
# Capability protocols
# ---------------------------------------------------------------------------


class SupportsAdd(Protocol[R_co]):
    def add(self, draft: BaseModel) -> R_co: ...


class SupportsGet(Protocol[R_co]):
    def get(self, record_id: UUID) -> R_co | None: ...

    def locked(self) -> AbstractContextManager[object]: ...


class SupportsDelete(Protocol):
    def delete(self, record_id: UUID) -> None: ...


class SupportsFind(Protocol[R_co]):
    def find(self, page_number: int = 0, page_size: int | None = None) -> list[R_co]: ...


class Repository(SupportsAdd[R], SupportsGet[R], SupportsDelete, SupportsFind[R], Protocol[R]):
    """Full capability set of a store owning one entity kind."""

    def replace(self, record: R) -> None: ...


# ---------------------------------------------------------------------------
# In-memory backend
# ---------------------------------------------------------------------------


class EntityStore(Generic[R]):
    """In-memory store for one record type.

    Records are frozen pydantic models, so handing out the stored instance
    is safe: nobody can change it behind the store's back.
    """

    def __init__(self, record_type: type[R], records: Iterable[R] = ()) -> None:
        self.record_type = record_type
        self._records: dict[UUID, R] = {record.id: record for record in records}
        self._lock = threading.RLock()
        self._revision = 0

    @property
    def name(self) -> str:
        return self.record_type.__name__.lower()

    @property
    def revision(self) -> int:
        """Mutation counter; bumped by every add, replace, and effective delete."""
        return self._revision

    @contextmanager
    def locked(self) -> Iterator[EntityStore[R]]:
        """Hold the whole-store lock across several operations."""
        with self._lock:
            yield self

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, draft: BaseModel) -> R:
        """Generate an id, build the full record from *draft*, and insert it."""
        record = self.record_type.model_validate({**draft.model_dump(), "id": new_id()})
        with self._lock:
            self._records[record.id] = record
            self._revision += 1
        logger.debug("Added %s %s", self.name, record.id)
        return record

    def get(self, record_id: UUID) -> R | None:
        with self._lock:
            return self._records.get(record_id)

    def delete(self, record_id: UUID) -> None:
        """Remove *record_id* if present. Deleting a missing id is a no-op."""
        with self._lock:
            if self._records.pop(record_id, None) is not None:
                self._revision += 1
                logger.debug("Deleted %s %s", self.name, record_id)

    def find(self, page_number: int = 0, page_size: int | None = None) -> list[R]:
        """Return one page of records in insertion order.

        ``skip = page_number * page_size``, ``take = page_size``. A
        ``page_size`` of None returns every record from the start.
        """
        if page_number < 0:
            msg = f"Invalid page number: {page_number} (must be >= 0)"
            raise ValidationError(msg, value=page_number)
        if page_size is not None and page_size < 0:
            msg = f"Invalid page size: {page_size} (must be >= 0)"
            raise ValidationError(msg, value=page_size)

        with self._lock:
            records = list(self._records.values())
        if page_size is None:
            return records
        skip = page_number * page_size
        return records[skip : skip + page_size]

    def replace(self, record: R) -> None:
        """Swap the stored record with the same id for *record*.

        Used by the composition layer while it holds this store's lock.
        """
        with self._lock:
            if record.id not in self._records:
                msg = f"Cannot replace missing {self.name} {record.id}"
                raise KeyError(msg)
            self._records[record.id] = record
            self._revision += 1

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def ids(self) -> list[UUID]:
        with self._lock:
            return list(self._records)

    def snapshot(self) -> list[R]:
        """All records in enumeration order, taken under the lock."""
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records
