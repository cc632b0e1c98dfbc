"""In-memory store configuration data."""

from pydantic import BaseModel


class _Data(BaseModel):
    """The in-memory store takes no options."""

    model_config = {"extra": "forbid"}
