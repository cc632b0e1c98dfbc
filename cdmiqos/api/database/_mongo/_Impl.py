"""MongoDB collection implementation."""

from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection

from .._AbstractImpl import _AbstractImpl
from ..DatabaseConfig import DatabaseConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    def __init__(self, database_config: DatabaseConfig, database_name: str, collection_name: str):
        if not isinstance(database_config.data, _Data):
            raise ValueError("MongoDB config data is required")
        self.uri = database_config.data.uri
        self.timeout_ms = database_config.data.server_selection_timeout_ms
        self.database_name = database_name
        self.collection_name = collection_name
        self._client: MongoClient[Any] | None = None
        self._collection: Collection | None = None

    def __enter__(self):
        self._client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        self._client.server_info()  # Test connection
        self._collection = self._client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            self._client.close()
        self._collection = None
        return False

    def find_one(self, filter: dict[str, Any], projection: dict[str, Any] | None = None) -> dict[str, Any] | None:
        return self._collection.find_one(filter, projection)  # type: ignore[union-attr]

    def replace_one(self, filter: dict[str, Any], document: dict[str, Any], upsert: bool = False) -> None:
        self._collection.replace_one(filter, document, upsert=upsert)  # type: ignore[union-attr]

    def find(self, filter: dict[str, Any] | None = None, projection: dict[str, Any] | None = None) -> Any:
        return self._collection.find(filter or {}, projection)  # type: ignore[union-attr]
