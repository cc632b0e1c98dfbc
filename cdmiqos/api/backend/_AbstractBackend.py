"""Abstract base class for QoS storage backends."""

from abc import ABC, abstractmethod

from ..capability.CapabilityClass import CapabilityClass
from ..status.ObjectStatus import ObjectStatus


class _AbstractBackend(ABC):
    @abstractmethod
    def get_capabilities(self) -> list[CapabilityClass]:
        pass

    @abstractmethod
    def get_status(self, path: str) -> ObjectStatus:
        pass

    @abstractmethod
    def request_transition(self, path: str, target_capability_uri: str) -> ObjectStatus:
        pass

    def wait_for_transitions(self, timeout: float | None = None) -> bool:
        """Block until in-flight transitions complete (backends without timers return at once)."""
        return True

    def close(self) -> None:
        pass
