"""Status store persisted in a MongoDB collection."""

from pymongo.errors import PyMongoError

from ....backend.BackendError import ConfigurationError
from ....database.Database import Database
from .._AbstractStore import _AbstractStore
from ...ObjectStatus import ObjectStatus
from ...StoreConfig import StoreConfig
from ._Data import _Data


class _Impl(_AbstractStore):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _Data):
            raise ValueError("Database store config data is required")
        self._database = Database(store_config.data.database, store_config.data.collection)
        try:
            self._database.__enter__()
        except PyMongoError as e:
            raise ConfigurationError(f"Cannot open status store collection {store_config.data.collection}: {e}") from e

    def get(self, path: str) -> ObjectStatus | None:
        document = self._database.find_one({"_id": path}, {"_id": 0, "path": 0})
        if document is None:
            return None
        return ObjectStatus.from_dict(document)

    def put(self, path: str, status: ObjectStatus) -> None:
        self._database.replace_one({"_id": path}, {"_id": path, "path": path, **status.to_dict()}, upsert=True)

    def paths(self) -> list[str]:
        return [document["path"] for document in self._database.find({}, {"_id": 0, "path": 1})]

    def close(self) -> None:
        self._database.__exit__(None, None, None)
