"""Capability class value object."""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .CapabilityType import CapabilityType
from .CapabilityUri import CapabilityUri

ALLOWED_TARGETS_KEY = "cdmi_capabilities_allowed"
PROVIDED_SUFFIX = "_provided"


@dataclass(frozen=True)
class CapabilityClass:
    """Named bundle of storage properties assignable to a container or data object.

    ``metadata`` holds the class definition verbatim, ``capabilities`` the
    operational flags shared by every class of the same type.
    """

    name: str
    type: CapabilityType
    metadata: Mapping[str, Any] = field(default_factory=dict)
    capabilities: Mapping[str, Any] = field(default_factory=dict)

    @property
    def uri(self) -> str:
        return CapabilityUri.for_class(self.type, self.name).value

    @property
    def allowed_targets(self) -> Any:
        """Declared allow-list, or None when the class declares none."""
        return self.metadata.get(ALLOWED_TARGETS_KEY)

    def monitored_attributes(self) -> dict[str, Any]:
        """Project metadata into the backend-provided view.

        Every key gets the ``_provided`` suffix, the allow-list included.
        """
        return {f"{key}{PROVIDED_SUFFIX}": copy.deepcopy(value) for key, value in self.metadata.items()}

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "uri": self.uri,
            "metadata": copy.deepcopy(dict(self.metadata)),
            "capabilities": copy.deepcopy(dict(self.capabilities)),
        }
