"""Output schemas for transition commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class TransitionRequestOutput(BaseOutputSchema):
    """Output schema for transition request command."""

    path: str = Field(..., description="Object path")
    target_capability_uri: str = Field(..., description="Requested target capability")
    accepted: bool = Field(..., description="Whether the request passed the capability policy")
    completed: bool = Field(..., description="Whether the transition finished before the command returned")
    status: dict[str, Any] = Field(..., description="Object status after the request, empty dict on error")


register_output_schema("transition", "request", TransitionRequestOutput)
