"""Abstract base class for status record stores."""

from abc import ABC, abstractmethod

from ..ObjectStatus import ObjectStatus


class _AbstractStore(ABC):
    """Plain path -> ObjectStatus storage; callers provide the locking."""

    @abstractmethod
    def get(self, path: str) -> ObjectStatus | None:
        pass

    @abstractmethod
    def put(self, path: str, status: ObjectStatus) -> None:
        pass

    @abstractmethod
    def paths(self) -> list[str]:
        pass

    def close(self) -> None:
        """Release resources held by the store."""
