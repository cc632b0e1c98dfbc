"""Capability API module."""

from .._output_schemas.capability import CapabilityListOutput, CapabilityShowOutput

__all__ = [
    "CapabilityListOutput",
    "CapabilityShowOutput",
]
