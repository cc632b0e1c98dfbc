"""Create a backend from a type name and a flat properties mapping."""

from typing import Any

from pydantic import ValidationError

from .Backend import Backend
from .BackendConfig import _BACKEND_REGISTRY, BackendConfig
from .BackendError import ConfigurationError


def create_storage_backend(backend_type: str, properties: dict[str, Any]) -> Backend:
    """Build a backend the way bootstrap code does, from plain properties.

    Args:
        backend_type: Registered backend name (e.g. "filesystem").
        properties: Backend properties; "filesystem" requires ``baseDirectory``.

    Raises:
        ConfigurationError: If the type is unknown or a property is missing or invalid.
    """
    if backend_type not in _BACKEND_REGISTRY:
        raise ConfigurationError(
            f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})"
        )
    try:
        backend_config = BackendConfig(type=backend_type, data=dict(properties))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {backend_type} backend properties: {e}") from e
    return Backend(backend_config)
