"""In-memory status store."""

import copy

from .._AbstractStore import _AbstractStore
from ...ObjectStatus import ObjectStatus
from ...StoreConfig import StoreConfig


class _Impl(_AbstractStore):
    """Keeps private copies so callers never alias a stored record."""

    def __init__(self, store_config: StoreConfig):
        self._records: dict[str, ObjectStatus] = {}

    def get(self, path: str) -> ObjectStatus | None:
        status = self._records.get(path)
        return copy.deepcopy(status) if status is not None else None

    def put(self, path: str, status: ObjectStatus) -> None:
        self._records[path] = copy.deepcopy(status)

    def paths(self) -> list[str]:
        return list(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__module__}._Impl({self._records!r})"
