"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from cdmiqos.api.backend.Backend import Backend
from cdmiqos.api.backend.BackendConfig import BackendConfig
from cdmiqos.api.status.StoreConfig import StoreConfig

GOLD = "/cdmi_capabilities/container/gold"
BRONZE = "/cdmi_capabilities/container/bronze"
SILVER = "/cdmi_capabilities/container/silver"
FAST = "/cdmi_capabilities/dataobject/fast"
SLOW = "/cdmi_capabilities/dataobject/slow"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def capabilities_document() -> dict:
    """Capability document with a gold -> bronze allow-list.

    ``silver`` declares no allow-list; ``bronze`` may go back to gold only.
    """
    return {
        "default_container_capability_class": GOLD,
        "default_dataobject_capability_class": FAST,
        "container_capabilities": {"cdmi_latency": True, "cdmi_data_redundancy": True},
        "dataobject_capabilities": {"cdmi_latency": True},
        "container_classes": {
            "gold": {
                "cdmi_latency": "100",
                "cdmi_data_redundancy": "3",
                "cdmi_capabilities_allowed": [BRONZE],
            },
            "bronze": {
                "cdmi_latency": "20000",
                "cdmi_data_redundancy": "1",
                "cdmi_capabilities_allowed": [GOLD],
            },
            "silver": {
                "cdmi_latency": "1000",
                "cdmi_data_redundancy": "2",
            },
        },
        "dataobject_classes": {
            "fast": {"cdmi_latency": "50", "cdmi_capabilities_allowed": [SLOW]},
            "slow": {"cdmi_latency": "90000", "cdmi_capabilities_allowed": [FAST]},
        },
        "container_exports": {
            "Network/WebHTTP": {"identifier": "http://localhost:8080/", "permissions": "oidc"},
        },
    }


def backend_config_dict(base_dir: Path, capabilities_file: Path, delay: float = 0.05) -> dict:
    return {
        "type": "filesystem",
        "data": {
            "baseDirectory": str(base_dir),
            "capabilities_file": str(capabilities_file),
            "transition_delay_secs": delay,
            "polling_interval_ms": 10000,
        },
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeClock:
    """Clock advancing one hour per call so minute-precision timestamps differ."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(hours=1)
        return current


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="capabilities_document")
def capabilities_document_fixture() -> dict:
    return capabilities_document()


@pytest.fixture
def capabilities_file(tmp_path: Path, capabilities_document: dict) -> Path:
    path = tmp_path / "capabilities.json"
    path.write_text(json.dumps(capabilities_document))
    return path


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Storage tree: directory ``d`` with two files and file ``f.txt`` at the root."""
    root = tmp_path / "data"
    (root / "d").mkdir(parents=True)
    (root / "d" / "a.txt").write_text("a")
    (root / "d" / "b.txt").write_text("b")
    (root / "f.txt").write_text("f")
    return root


@pytest.fixture
def backend_config(base_dir: Path, capabilities_file: Path) -> BackendConfig:
    return BackendConfig(**backend_config_dict(base_dir, capabilities_file))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def backend(backend_config: BackendConfig, clock: FakeClock) -> Iterator[Backend]:
    with Backend(backend_config, StoreConfig(type="memory", data={}), clock=clock) as b:
        yield b
        b.wait_for_transitions(timeout=5)


@pytest.fixture
def qos_home(tmp_path: Path, monkeypatch, base_dir: Path, capabilities_file: Path) -> Path:
    """Set up CDMIQOS_HOME with a config file pointing at the test storage tree."""
    home = tmp_path / ".cdmiqos"
    home.mkdir()
    monkeypatch.setenv("CDMIQOS_HOME", str(home))
    config = {
        "backend": backend_config_dict(base_dir, capabilities_file),
        "store": {"type": "memory", "data": {}},
        "log": {"level": "DEBUG"},
    }
    (home / "config.json").write_text(json.dumps(config))
    return home
