"""Capability configuration document with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CapabilitiesDocument(BaseModel):
    """Parsed capability configuration.

    Class definitions keep document order, which fixes the order of
    ``CapabilityCatalog.list_capabilities()``.
    """

    model_config = ConfigDict(extra="allow")

    default_container_capability_class: str = Field(..., min_length=1)
    default_dataobject_capability_class: str = Field(..., min_length=1)
    container_capabilities: dict[str, Any] = Field(..., description="Flags shared by all container classes")
    dataobject_capabilities: dict[str, Any] = Field(..., description="Flags shared by all data object classes")
    container_classes: dict[str, dict[str, Any]] = Field(..., description="Container class name -> metadata")
    dataobject_classes: dict[str, dict[str, Any]] = Field(..., description="Data object class name -> metadata")
    container_exports: dict[str, Any] = Field(..., description="Export protocol name -> export metadata")
