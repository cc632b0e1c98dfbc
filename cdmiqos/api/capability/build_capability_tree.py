"""Build CDMI capability objects from capability classes."""

import copy
from collections.abc import Iterable
from typing import Any

from .CapabilityClass import CapabilityClass
from .CapabilityType import CapabilityType
from .CapabilityUri import CAPABILITIES_ROOT


def build_capability_tree(classes: Iterable[CapabilityClass]) -> dict[str, dict[str, Any]]:
    """Lay capability classes out as the CDMI capability hierarchy.

    Keys are object URIs. The root ``/cdmi_capabilities/`` lists one child per
    type, each type node lists its class names and each class node carries the
    class capabilities and metadata.
    """
    classes = list(classes)
    tree: dict[str, dict[str, Any]] = {
        f"{CAPABILITIES_ROOT}/": {
            "objectName": "cdmi_capabilities/",
            "parentURI": "/",
            "capabilities": {},
            "metadata": {},
            "children": [f"{t.value}/" for t in CapabilityType],
        }
    }
    for capability_type in CapabilityType:
        type_uri = f"{CAPABILITIES_ROOT}/{capability_type.value}/"
        members = [c for c in classes if c.type is capability_type]
        tree[type_uri] = {
            "objectName": f"{capability_type.value}/",
            "parentURI": f"{CAPABILITIES_ROOT}/",
            "capabilities": {},
            "metadata": {},
            "children": [c.name for c in members],
        }
        for capability_class in members:
            tree[capability_class.uri] = {
                "objectName": capability_class.name,
                "parentURI": type_uri,
                "capabilities": copy.deepcopy(dict(capability_class.capabilities)),
                "metadata": copy.deepcopy(dict(capability_class.metadata)),
                "children": [],
            }
    return tree
