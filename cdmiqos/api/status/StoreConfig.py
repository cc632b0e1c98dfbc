"""Status store configuration with Pydantic validation."""

import importlib
from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._store._AbstractStore import _AbstractStore
from ._store._database._Data import _Data as _DatabaseData
from ._store._memory._Data import _Data as _MemoryData

# Registry: add new stores here (ONLY place store types are enumerated)
_STORE_REGISTRY: dict[str, type[BaseModel]] = {
    "memory": _MemoryData,
    "database": _DatabaseData,
}


class StoreConfig(BaseModel):
    type: str = Field(..., description="Status store type")
    data: BaseModel = Field(..., description="Store-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"store config must be a dict, got {type(values).__name__}")
        store_type = values.get("type")
        if not store_type:
            raise ValueError("store.type is required")
        config_data_class = _STORE_REGISTRY.get(store_type)
        if not config_data_class:
            raise ValueError(f"Unknown store type: {store_type!r} (supported: {list(_STORE_REGISTRY.keys())})")
        data_dict = values.get("data", {})
        if not isinstance(data_dict, BaseModel):
            values = {**values, "data": config_data_class(**data_dict)}
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result

    def create_store(self) -> _AbstractStore:
        """Instantiate the configured store implementation."""
        module = importlib.import_module(f"cdmiqos.api.status._store._{self.type}._Impl")
        return module._Impl(self)
