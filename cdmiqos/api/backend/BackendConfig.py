"""Backend configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._filesystem._Data import _Data as _FilesystemData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "filesystem": _FilesystemData,
}


class BackendConfig(BaseModel):
    type: str = Field(..., description="Storage backend type")
    data: BaseModel = Field(..., description="Backend-specific properties")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"backend config must be a dict, got {type(values).__name__}")
        backend_type = values.get("type")
        if not backend_type:
            raise ValueError("backend.type is required")
        config_data_class = _BACKEND_REGISTRY.get(backend_type)
        if not config_data_class:
            raise ValueError(f"Unknown backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data_dict = values.get("data")
        if data_dict is None:
            raise ValueError("backend.data is required")
        if not isinstance(data_dict, BaseModel):
            values = {**values, "data": config_data_class(**data_dict)}
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
