"""Output schemas for status commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class StatusShowOutput(BaseOutputSchema):
    """Output schema for status show command."""

    path: str = Field(..., description="Object path")
    status: dict[str, Any] = Field(..., description="Object status, empty dict on error")


register_output_schema("status", "show", StatusShowOutput)
