"""Local filesystem storage provider."""

import logging
from pathlib import Path

from ..backend.BackendError import BackendError, ConfigurationError
from ._AbstractStorage import _AbstractStorage

logger = logging.getLogger(__name__)


class FilesystemStorage(_AbstractStorage):
    """Resolves object paths under a base directory."""

    def __init__(self, base_directory: str | Path):
        if not base_directory:
            raise ConfigurationError("Base directory path is missing.")
        self.base_directory = Path(base_directory).expanduser().resolve()

    def resolve(self, path: str) -> Path:
        """Map an object path onto the filesystem.

        Raises:
            BackendError: If the path is malformed or escapes the base directory.
        """
        if "\x00" in path:
            raise BackendError(f"Invalid object path: {path!r}")
        resolved = (self.base_directory / path.lstrip("/")).resolve()
        if resolved != self.base_directory and self.base_directory not in resolved.parents:
            raise BackendError(f"Object path outside base directory: {path!r}")
        logger.debug("Filesystem path %s", resolved)
        return resolved

    def key(self, path: str) -> str:
        """Absolute object path relative to the base directory, e.g. ``/d/a.txt``.

        ``d``, ``/d`` and ``/x/../d`` all map to ``/d``; the base directory itself is ``/``.
        """
        relative = self.resolve(path).relative_to(self.base_directory).as_posix()
        return "/" if relative == "." else f"/{relative}"

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def is_directory(self, path: str) -> bool:
        return self.resolve(path).is_dir()

    def list_children(self, path: str) -> list[str]:
        try:
            return sorted(child.name for child in self.resolve(path).iterdir())
        except OSError as e:
            raise BackendError(f"Can't get directory listing for {path}: {e}") from e
