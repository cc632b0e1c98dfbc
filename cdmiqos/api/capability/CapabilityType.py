"""Capability class types."""

from enum import Enum


class CapabilityType(str, Enum):
    """Kind of object a capability class applies to."""

    CONTAINER = "container"
    DATAOBJECT = "dataobject"
