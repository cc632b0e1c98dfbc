"""Database public API."""

import importlib
from typing import Any

from ._AbstractImpl import _AbstractImpl
from .DatabaseConfig import _BACKEND_REGISTRY, DatabaseConfig


class Database:
    """Public API for database operations on one collection."""

    def __init__(self, database_config: DatabaseConfig, collection_name: str):
        self.database_config = database_config
        self.prefix = database_config.prefix
        self.collection_name = collection_name
        self._impl: _AbstractImpl | None = None

    def __enter__(self):
        backend_type = self.database_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module = importlib.import_module(f"cdmiqos.api.database._{backend_type}._Impl")
        self._impl = module._Impl(self.database_config, self.prefix, self.collection_name)
        self._impl.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._impl:
            return self._impl.__exit__(exc_type, exc_val, exc_tb)
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Collection not initialized. Use as context manager first.")
        return self._impl

    def find_one(self, filter: dict[str, Any], projection: dict[str, Any] | None = None) -> dict[str, Any] | None:
        return self._require_impl().find_one(filter, projection)

    def replace_one(self, filter: dict[str, Any], document: dict[str, Any], upsert: bool = False) -> None:
        self._require_impl().replace_one(filter, document, upsert)

    def find(self, filter: dict[str, Any] | None = None, projection: dict[str, Any] | None = None) -> Any:
        return self._require_impl().find(filter, projection)

