from dataclasses import dataclass

from .CapabilityType import CapabilityType

CAPABILITIES_ROOT = "/cdmi_capabilities"


@dataclass(frozen=True)
class CapabilityUri:
    """Parsed capability identifier.

    Identifiers are path-like strings whose last two segments name the
    capability type and the class name, e.g. ``/cdmi_capabilities/container/gold``.
    """

    value: str
    type: CapabilityType
    name: str

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value: str) -> "CapabilityUri":
        """Split an identifier into type and name.

        Raises:
            ValueError: If the identifier has fewer than two segments, names an
                unknown type or has an empty class name.
        """
        if not isinstance(value, str):
            raise ValueError(f"Capability URI must be a string, got {type(value).__name__}")
        segments = value.split("/")
        if len(segments) < 2:
            raise ValueError(f"Malformed capability URI: {value!r}")
        type_segment, name = segments[-2], segments[-1]
        try:
            capability_type = CapabilityType(type_segment)
        except ValueError as e:
            raise ValueError(f"Invalid capabilities type {type_segment!r} in {value!r}") from e
        if not name:
            raise ValueError(f"Missing capabilities name in {value!r}")
        return cls(value=value, type=capability_type, name=name)

    @classmethod
    def for_class(cls, capability_type: CapabilityType, name: str) -> "CapabilityUri":
        return cls(value=f"{CAPABILITIES_ROOT}/{capability_type.value}/{name}", type=capability_type, name=name)
