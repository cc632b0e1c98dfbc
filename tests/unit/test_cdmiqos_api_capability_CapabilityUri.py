"""Unit tests for cdmiqos.api.capability.CapabilityUri module."""

import pytest

from cdmiqos.api.capability.CapabilityType import CapabilityType
from cdmiqos.api.capability.CapabilityUri import CapabilityUri


def test_parse_uses_last_two_segments():
    uri = CapabilityUri.parse("/cdmi_capabilities/container/gold")
    assert uri.type is CapabilityType.CONTAINER
    assert uri.name == "gold"
    assert str(uri) == "/cdmi_capabilities/container/gold"


def test_parse_ignores_prefix_segments():
    uri = CapabilityUri.parse("http://localhost:8080/api/cdmi_capabilities/dataobject/slow")
    assert uri.type is CapabilityType.DATAOBJECT
    assert uri.name == "slow"


@pytest.mark.parametrize(
    "value",
    ["gold", "/cdmi_capabilities/queue/gold", "/cdmi_capabilities/container/", ""],
)
def test_parse_rejects_malformed(value):
    with pytest.raises(ValueError):
        CapabilityUri.parse(value)


def test_parse_rejects_non_string():
    with pytest.raises(ValueError, match="must be a string"):
        CapabilityUri.parse(None)  # type: ignore[arg-type]


def test_for_class_builds_canonical_uri():
    uri = CapabilityUri.for_class(CapabilityType.DATAOBJECT, "fast")
    assert uri.value == "/cdmi_capabilities/dataobject/fast"
    assert CapabilityUri.parse(uri.value) == uri
