"""Unit tests for cdmiqos.api.capability cmd_list and cmd_show."""

import pytest

from cdmiqos.api.capability.cmd_list import cmd_list
from cdmiqos.api.capability.cmd_show import cmd_show
from cdmiqos.api.validate_output import validate_output
from tests.conftest import BRONZE, GOLD, run_cmd


def test_cmd_list(qos_home):
    result = run_cmd(cmd_list)
    assert result.success
    assert result.output["count"] == 5
    assert [c["name"] for c in result.output["capabilities"]] == ["gold", "bronze", "silver", "fast", "slow"]
    assert result.output["errors"] == []
    assert validate_output(cmd_list, result.output) == result.output


def test_cmd_list_without_config(qos_home):
    (qos_home / "config.json").unlink()
    result = run_cmd(cmd_list)
    assert not result.success
    assert result.output["count"] == 0
    assert "not found" in result.output["errors"][0]


@pytest.mark.parametrize("uri", ["/cdmi_capabilities/", "/cdmi_capabilities"])
def test_cmd_show_root(qos_home, uri):
    result = run_cmd(cmd_show, uri)
    assert result.success
    assert result.output["capability"]["children"] == ["container/", "dataobject/"]


@pytest.mark.parametrize("uri", ["/cdmi_capabilities/container/", "/cdmi_capabilities/container"])
def test_cmd_show_type(qos_home, uri):
    result = run_cmd(cmd_show, uri)
    assert result.success
    assert result.output["capability"]["children"] == ["gold", "bronze", "silver"]


def test_cmd_show_class(qos_home):
    result = run_cmd(cmd_show, GOLD)
    assert result.success
    capability = result.output["capability"]
    assert capability["objectName"] == "gold"
    assert capability["metadata"]["cdmi_capabilities_allowed"] == [BRONZE]


def test_cmd_show_unknown(qos_home):
    result = run_cmd(cmd_show, "/cdmi_capabilities/container/platinum")
    assert not result.success
    assert result.output["capability"] == {}
    assert "not found" in result.output["errors"][0]
