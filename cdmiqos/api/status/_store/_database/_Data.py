"""Database-backed store configuration data."""

from typing import Any

from pydantic import BaseModel, Field

from ....database.DatabaseConfig import DatabaseConfig


class _Data(BaseModel):
    model_config = {"extra": "forbid"}

    collection: str = Field(default="status", min_length=1, description="Collection holding status records")
    database: DatabaseConfig = Field(..., description="Database connection settings")

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize the nested database config."""
        result = super().model_dump(**kwargs)
        result["database"] = self.database.model_dump(**kwargs)
        return result
