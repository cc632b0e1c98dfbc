"""Backend public API."""

import importlib
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from ..capability.CapabilityClass import CapabilityClass
from ..status.ObjectStatus import ObjectStatus
from ..status.StoreConfig import StoreConfig
from ._AbstractBackend import _AbstractBackend
from .BackendConfig import _BACKEND_REGISTRY, BackendConfig
from .BackendError import ConfigurationError

if TYPE_CHECKING:
    from ..config.QosConfig import QosConfig

logger = logging.getLogger(__name__)


class Backend:
    """Single integration surface for capability listing, status and transitions.

    The implementation is chosen once, from ``backend_config.type``.
    """

    def __init__(
        self,
        backend_config: BackendConfig,
        store_config: StoreConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        backend_type = backend_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ConfigurationError(
                f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})"
            )
        if store_config is None:
            store_config = StoreConfig(type="memory", data={})

        self.backend_config = backend_config
        self.store_config = store_config

        module = importlib.import_module(f"cdmiqos.api.backend._{backend_type}._Impl")
        store = store_config.create_store()
        try:
            self._impl: _AbstractBackend = module._Impl(backend_config, store, clock=clock)
        except Exception:
            store.close()
            raise
        logger.debug("Created %s backend with %s store", backend_type, store_config.type)

    @classmethod
    def from_config(cls, config: "QosConfig", clock: Callable[[], datetime] | None = None) -> "Backend":
        return cls(config.backend, config.store, clock=clock)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def get_capabilities(self) -> list[CapabilityClass]:
        return self._impl.get_capabilities()

    def get_status(self, path: str) -> ObjectStatus:
        return self._impl.get_status(path)

    def request_transition(self, path: str, target_capability_uri: str) -> ObjectStatus:
        return self._impl.request_transition(path, target_capability_uri)

    def wait_for_transitions(self, timeout: float | None = None) -> bool:
        return self._impl.wait_for_transitions(timeout)

    def close(self) -> None:
        self._impl.close()

    @property
    def impl(self) -> _AbstractBackend:
        """Get the underlying implementation (for code that needs direct access)."""
        return self._impl
