"""Top-level cdmiqos configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..backend.BackendConfig import BackendConfig
from ..backend.BackendError import ConfigurationError
from ..status.StoreConfig import StoreConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class QosConfig(BaseModel):
    """Top-level configuration: storage backend, status store and logging."""

    model_config = ConfigDict(extra="forbid")

    backend: BackendConfig
    store: StoreConfig = Field(default_factory=lambda: StoreConfig(type="memory", data={}))
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on CDMIQOS_HOME or default to ~/.cdmiqos."""
        return get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "QosConfig":
        """Load and validate config from file.

        Raises:
            ConfigurationError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ConfigurationError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigurationError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert QosConfig instance to a dictionary for serialization."""
        return {
            "backend": self.backend.model_dump(by_alias=True),
            "store": self.store.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration atomically (temp file, then rename)."""
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
