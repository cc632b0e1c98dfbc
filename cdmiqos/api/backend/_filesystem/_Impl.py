"""Filesystem backend simulating QoS transitions."""

import logging
from collections.abc import Callable
from datetime import datetime

from ...capability.CapabilityCatalog import CapabilityCatalog
from ...capability.CapabilityClass import CapabilityClass
from ...capability.CapabilityResolver import CapabilityResolver
from ...capability.load_capabilities_document import load_capabilities_document
from ...status._store._AbstractStore import _AbstractStore
from ...status.association_time import association_time
from ...status.FilesystemStorage import FilesystemStorage
from ...status.ObjectStatus import ObjectStatus
from ...status.StatusRegistry import StatusRegistry
from ...transition.TimerScheduler import TimerScheduler
from ...transition.TransitionScheduler import TransitionScheduler
from .._AbstractBackend import _AbstractBackend
from ..BackendConfig import BackendConfig
from ..BackendError import ConfigurationError
from ._Data import _Data

logger = logging.getLogger(__name__)


class _Impl(_AbstractBackend):
    def __init__(
        self,
        backend_config: BackendConfig,
        store: _AbstractStore,
        clock: Callable[[], datetime] | None = None,
    ):
        if not isinstance(backend_config.data, _Data):
            raise ConfigurationError("Filesystem backend config data is required")
        data = backend_config.data

        self.storage = FilesystemStorage(data.base_directory)
        if not self.storage.base_directory.is_dir():
            raise ConfigurationError(f"Base directory does not exist: {self.storage.base_directory}")
        logger.debug("Base directory %s", self.storage.base_directory)

        self.catalog = CapabilityCatalog.load(load_capabilities_document(data.capabilities_file))
        self.registry = StatusRegistry(
            self.catalog,
            self.storage,
            store,
            startup_time=association_time(clock() if clock else None),
        )
        self.resolver = CapabilityResolver(self.catalog, self.registry)
        self.timer = TimerScheduler()
        self.scheduler = TransitionScheduler(
            self.catalog,
            self.registry,
            self.resolver,
            self.timer,
            delay_secs=data.transition_delay_secs,
            polling_interval_ms=data.polling_interval_ms,
            clock=clock,
        )
        resumed = self.scheduler.resume_pending()
        if resumed:
            logger.info("Resumed %d pending QoS transition(s)", resumed)

    def get_capabilities(self) -> list[CapabilityClass]:
        return self.catalog.list_capabilities()

    def get_status(self, path: str) -> ObjectStatus:
        return self.registry.get_status(path)

    def request_transition(self, path: str, target_capability_uri: str) -> ObjectStatus:
        return self.scheduler.request_transition(path, target_capability_uri)

    def wait_for_transitions(self, timeout: float | None = None) -> bool:
        return self.timer.wait(timeout)

    def close(self) -> None:
        # Completions write to the store, so it must outlive every pending timer
        self.timer.wait()
        self.registry.close()
