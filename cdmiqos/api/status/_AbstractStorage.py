"""Abstract base class for storage providers consulted by the registry."""

from abc import ABC, abstractmethod


class _AbstractStorage(ABC):
    @abstractmethod
    def key(self, path: str) -> str:
        """Canonical form of ``path``; aliases of one object share a key."""
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        pass

    @abstractmethod
    def list_children(self, path: str) -> list[str]:
        """Names of the immediate children of a directory."""
        pass
