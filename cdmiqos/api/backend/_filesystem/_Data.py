"""Filesystem backend configuration data."""

from pydantic import BaseModel, ConfigDict, Field

from ...transition.TransitionScheduler import DEFAULT_POLLING_INTERVAL_MS, DEFAULT_TRANSITION_DELAY_SECS


class _Data(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    base_directory: str = Field(
        ...,
        alias="baseDirectory",
        min_length=1,
        description="Root directory under which object paths are resolved",
    )
    capabilities_file: str | None = Field(
        default=None,
        description="Capability document path; the packaged default is used when unset",
    )
    transition_delay_secs: float = Field(default=DEFAULT_TRANSITION_DELAY_SECS, ge=0)
    polling_interval_ms: int = Field(default=DEFAULT_POLLING_INTERVAL_MS, gt=0)
