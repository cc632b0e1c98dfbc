"""Output schemas for capability commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class CapabilityListOutput(BaseOutputSchema):
    """Output schema for capability list command."""

    capabilities: list[dict[str, Any]] = Field(..., description="Capability classes in catalog order")
    count: int = Field(..., description="Number of capability classes")


class CapabilityShowOutput(BaseOutputSchema):
    """Output schema for capability show command."""

    uri: str = Field(..., description="Requested capability object URI")
    capability: dict[str, Any] = Field(..., description="CDMI capability object, empty dict if not found")


register_output_schema("capability", "list", CapabilityListOutput)
register_output_schema("capability", "show", CapabilityShowOutput)
