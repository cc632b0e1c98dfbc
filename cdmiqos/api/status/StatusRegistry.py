"""Object status registry with per-path critical sections."""

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import replace

from ..capability.CapabilityCatalog import CapabilityCatalog
from ..capability.CapabilityType import CapabilityType
from ..backend.BackendError import NotFoundError
from ._AbstractStorage import _AbstractStorage
from ._store._AbstractStore import _AbstractStore
from .ObjectStatus import ObjectStatus

logger = logging.getLogger(__name__)

ASSOCIATION_TIME_KEY = "cdmi_capability_association_time"
DEFAULT_DATAOBJECT_CLASS_KEY = "cdmi_default_dataobject_capability_class"


class StatusRegistry:
    """Maps object paths to their current ObjectStatus.

    Every read-modify-write on a path must run inside ``lock(path)``. Locks are
    re-entrant and per path, so unrelated objects never contend. Paths are
    canonicalised by the storage provider, so aliases such as ``d`` and ``/d``
    share one record and one lock. Records are never evicted, even after the
    object disappears from storage.
    """

    def __init__(
        self,
        catalog: CapabilityCatalog,
        storage: _AbstractStorage,
        store: _AbstractStore,
        startup_time: str,
    ):
        self._catalog = catalog
        self._storage = storage
        self._store = store
        self._startup_time = startup_time
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def key(self, path: str) -> str:
        return self._storage.key(path)

    @contextmanager
    def lock(self, path: str) -> Iterator[None]:
        key = self.key(path)
        with self._locks_guard:
            path_lock = self._locks.setdefault(key, threading.RLock())
        with path_lock:
            yield

    def get_status(self, path: str) -> ObjectStatus:
        """Get the status of ``path``, creating the default record on first access.

        ``children`` is refreshed from storage on every call.

        Raises:
            NotFoundError: If the path does not exist in storage.
        """
        key = self.key(path)
        with self.lock(key):
            if not self._storage.exists(key):
                raise NotFoundError(path)

            status = self._store.get(key)
            if status is None:
                status = self._default_status(key)
            elif self._storage.is_directory(key):
                status = replace(status, children=self._storage.list_children(key))
            self._store.put(key, status)

            logger.debug("---- Get current status dump ----")
            logger.debug("%s", self._store)
            return status

    def put(self, path: str, status: ObjectStatus) -> None:
        key = self.key(path)
        with self.lock(key):
            self._store.put(key, status)

    def update(self, path: str, compute: Callable[[ObjectStatus | None], ObjectStatus]) -> ObjectStatus:
        """Replace the stored record of ``path`` with ``compute(stored)`` atomically.

        The stored record is read without consulting storage, so it also works
        for objects removed since the record was created.
        """
        key = self.key(path)
        with self.lock(key):
            status = compute(self._store.get(key))
            self._store.put(key, status)
            logger.debug("---- Updated status dump ----")
            logger.debug("%s", self._store)
            return status

    def paths(self) -> list[str]:
        return self._store.paths()

    def pending(self) -> list[tuple[str, ObjectStatus]]:
        """Stored records with a transition in flight, keyed by canonical path."""
        result = []
        for key in self.paths():
            with self.lock(key):
                status = self._store.get(key)
            if status is not None and status.in_transition:
                result.append((key, status))
        return result

    def close(self) -> None:
        self._store.close()

    def _default_status(self, path: str) -> ObjectStatus:
        if self._storage.is_directory(path):
            capability_uri = self._catalog.default_class(CapabilityType.CONTAINER)
            metadata = self._catalog.monitored_attributes(capability_uri)
            metadata[ASSOCIATION_TIME_KEY] = self._startup_time
            metadata[DEFAULT_DATAOBJECT_CLASS_KEY] = self._catalog.default_class(CapabilityType.DATAOBJECT)
            return ObjectStatus(
                current_capability_uri=capability_uri,
                metadata=metadata,
                export_attributes=self._catalog.exports,
                children=self._storage.list_children(path),
            )

        capability_uri = self._catalog.default_class(CapabilityType.DATAOBJECT)
        metadata = self._catalog.monitored_attributes(capability_uri)
        metadata[ASSOCIATION_TIME_KEY] = self._startup_time
        return ObjectStatus(current_capability_uri=capability_uri, metadata=metadata)
