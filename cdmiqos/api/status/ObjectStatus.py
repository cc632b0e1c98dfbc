"""QoS status of one stored object."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObjectStatus:
    """Capability assignment and transition state of an object.

    ``target_capability_uri`` is None unless a transition is in flight.
    ``export_attributes`` and ``children`` are only set for containers.
    """

    current_capability_uri: str
    target_capability_uri: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    export_attributes: dict[str, Any] | None = None
    children: list[str] | None = None

    def __post_init__(self):
        if self.target_capability_uri is not None and self.target_capability_uri == self.current_capability_uri:
            raise ValueError(f"Target capability equals current capability: {self.current_capability_uri}")

    @property
    def in_transition(self) -> bool:
        return self.target_capability_uri is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_capability_uri": self.current_capability_uri,
            "target_capability_uri": self.target_capability_uri,
            "metadata": dict(self.metadata),
            "export_attributes": dict(self.export_attributes) if self.export_attributes is not None else None,
            "children": list(self.children) if self.children is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ObjectStatus":
        return cls(
            current_capability_uri=data["current_capability_uri"],
            target_capability_uri=data.get("target_capability_uri"),
            metadata=dict(data.get("metadata") or {}),
            export_attributes=data.get("export_attributes"),
            children=data.get("children"),
        )
