"""Errors raised across the backend boundary."""

from typing import Any


class BackendError(Exception):
    """Base class for every error a backend reports to its callers."""


class ConfigurationError(BackendError):
    """Startup configuration is missing or malformed."""


class NotFoundError(BackendError):
    """Object path does not exist on the storage provider."""

    def __init__(self, path: str):
        super().__init__(f"No such object: {path}")
        self.path = path


class DeniedError(BackendError):
    """Requested transition is not permitted by the capability policy."""

    def __init__(self, path: str, target_capability_uri: str, decision: Any = None):
        super().__init__(f"Transition of {path} to {target_capability_uri} not permitted")
        self.path = path
        self.target_capability_uri = target_capability_uri
        self.decision = decision
