"""Capability catalog: loads and indexes capability classes."""

import copy
import logging
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from ..backend.BackendError import ConfigurationError
from .CapabilitiesDocument import CapabilitiesDocument
from .CapabilityClass import CapabilityClass
from .CapabilityType import CapabilityType
from .CapabilityUri import CapabilityUri
from .build_capability_tree import build_capability_tree

logger = logging.getLogger(__name__)


class CapabilityCatalog:
    """Read-only index of capability classes built once at startup."""

    def __init__(self, document: CapabilitiesDocument):
        self._document = document
        self._classes: list[CapabilityClass] = []
        self._index: dict[tuple[CapabilityType, str], CapabilityClass] = {}
        self._monitored: dict[tuple[CapabilityType, str], dict[str, Any]] = {}

        groups = (
            (CapabilityType.CONTAINER, document.container_classes, document.container_capabilities),
            (CapabilityType.DATAOBJECT, document.dataobject_classes, document.dataobject_capabilities),
        )
        for capability_type, classes, capabilities in groups:
            shared = MappingProxyType(copy.deepcopy(capabilities))
            for name, definition in classes.items():
                logger.debug("found %s capabilities class %s: %s", capability_type.value, name, definition)
                capability_class = CapabilityClass(
                    name=name,
                    type=capability_type,
                    metadata=MappingProxyType(copy.deepcopy(definition)),
                    capabilities=shared,
                )
                self._classes.append(capability_class)
                self._index[(capability_type, name)] = capability_class
                self._monitored[(capability_type, name)] = capability_class.monitored_attributes()

        for kind in CapabilityType:
            default_uri = self.default_class(kind)
            default = self.find(default_uri)
            if default is None or default.type is not kind:
                raise ConfigurationError(
                    f"Default {kind.value} capability class {default_uri!r} is not a {kind.value} class"
                )

    @classmethod
    def load(cls, config: dict[str, Any]) -> "CapabilityCatalog":
        """Build a catalog from an already-parsed capability document.

        Raises:
            ConfigurationError: If a required key is missing or has the wrong shape.
        """
        if not isinstance(config, dict):
            raise ConfigurationError(f"capabilities config must be a dict, got {type(config).__name__}")
        try:
            document = CapabilitiesDocument(**config)
        except ValidationError as e:
            first = (e.errors() or [{"msg": str(e), "loc": ()}])[0]
            field = ".".join(str(x) for x in first.get("loc", ()))
            detail = f"{field}: {first.get('msg')}" if field else first.get("msg")
            raise ConfigurationError(f"Capabilities configuration error: {detail}") from e
        return cls(document)

    def list_capabilities(self) -> list[CapabilityClass]:
        return list(self._classes)

    def find(self, capability_uri: str) -> CapabilityClass | None:
        """Look up the class an identifier names; None if malformed or unknown."""
        try:
            parsed = CapabilityUri.parse(capability_uri)
        except ValueError:
            return None
        return self._index.get((parsed.type, parsed.name))

    def monitored_attributes(self, capability_uri: str) -> dict[str, Any]:
        """Get monitored attributes for the class named by ``capability_uri``.

        Unknown or malformed identifiers yield an empty mapping.
        """
        try:
            parsed = CapabilityUri.parse(capability_uri)
        except ValueError as e:
            logger.warning("Cannot look up monitored attributes: %s", e)
            return {}

        logger.debug("lookup capabilities %s %s for %s", parsed.type.value, parsed.name, capability_uri)
        monitored = self._monitored.get((parsed.type, parsed.name))
        if monitored is None:
            logger.warning("Unknown capabilities name %s", parsed.name)
            return {}
        return copy.deepcopy(monitored)

    def default_class(self, kind: CapabilityType) -> str:
        if kind is CapabilityType.CONTAINER:
            return self._document.default_container_capability_class
        return self._document.default_dataobject_capability_class

    @property
    def exports(self) -> dict[str, Any]:
        return copy.deepcopy(self._document.container_exports)

    def capability_tree(self) -> dict[str, dict[str, Any]]:
        """Build the CDMI capability objects rooted at ``/cdmi_capabilities/``."""
        return build_capability_tree(self._classes)
