"""Unit tests for cdmiqos.api.backend.Backend module."""

import uuid

import pytest
from pydantic import ValidationError

from cdmiqos.api.backend.Backend import Backend
from cdmiqos.api.backend.BackendConfig import BackendConfig
from cdmiqos.api.backend.BackendError import BackendError, ConfigurationError, NotFoundError
from cdmiqos.api.backend.create_storage_backend import create_storage_backend
from cdmiqos.api.status.ObjectStatus import ObjectStatus
from cdmiqos.api.status.StoreConfig import StoreConfig
from tests.conftest import BRONZE, GOLD, FakeClock, backend_config_dict


def test_get_capabilities(backend):
    names = [capability.name for capability in backend.get_capabilities()]
    assert names == ["gold", "bronze", "silver", "fast", "slow"]


def test_get_status_of_base_directory(backend):
    status = backend.get_status("/")
    assert status.current_capability_uri == GOLD
    assert status.children == ["d", "f.txt"]


def test_get_status_missing(backend):
    with pytest.raises(NotFoundError):
        backend.get_status("/nope")


def test_get_status_escape_rejected(backend):
    with pytest.raises(BackendError):
        backend.get_status("../secret")


def test_missing_base_directory(tmp_path, capabilities_file):
    config = BackendConfig(**backend_config_dict(tmp_path / "absent", capabilities_file))
    with pytest.raises(ConfigurationError, match="does not exist"):
        Backend(config)


def test_base_directory_is_file(base_dir, capabilities_file):
    config = BackendConfig(**backend_config_dict(base_dir / "f.txt", capabilities_file))
    with pytest.raises(ConfigurationError):
        Backend(config)


def test_malformed_capabilities_file(base_dir, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"container_classes": {}}')
    with pytest.raises(ConfigurationError):
        Backend(BackendConfig(**backend_config_dict(base_dir, bad)))


def test_packaged_capabilities_used_by_default(base_dir):
    config = BackendConfig(type="filesystem", data={"baseDirectory": str(base_dir)})
    with Backend(config) as backend:
        assert backend.get_status("d").current_capability_uri == "/cdmi_capabilities/container/DiskOnly"
        assert backend.get_status("f.txt").current_capability_uri == "/cdmi_capabilities/dataobject/DiskOnly"


def test_database_store_survives_restart(base_dir, capabilities_file):
    backend_config = BackendConfig(**backend_config_dict(base_dir, capabilities_file, delay=0))
    store_config = StoreConfig(
        type="database",
        data={"database": {"type": "mongomock", "prefix": f"cdmiqos_test_{uuid.uuid4().hex}", "data": {}}},
    )
    with Backend(backend_config, store_config, clock=FakeClock()) as backend:
        backend.request_transition("d", BRONZE)
        assert backend.wait_for_transitions(timeout=5)

    with Backend(backend_config, store_config, clock=FakeClock()) as backend:
        assert backend.get_status("d").current_capability_uri == BRONZE


def test_unknown_backend_type_rejected():
    with pytest.raises(ValidationError, match="Unknown backend type"):
        BackendConfig(type="s3", data={})


def test_backend_config_dump_uses_alias(base_dir, capabilities_file):
    config = BackendConfig(**backend_config_dict(base_dir, capabilities_file))
    dumped = config.model_dump(by_alias=True)
    assert dumped["data"]["baseDirectory"] == str(base_dir)
    assert dumped["data"]["polling_interval_ms"] == 10000


def test_create_storage_backend(base_dir, capabilities_file):
    backend = create_storage_backend(
        "filesystem", {"baseDirectory": str(base_dir), "capabilities_file": str(capabilities_file)}
    )
    with backend:
        assert backend.get_status("d").current_capability_uri == GOLD


def test_create_storage_backend_requires_base_directory():
    with pytest.raises(ConfigurationError, match="filesystem"):
        create_storage_backend("filesystem", {})


def test_create_storage_backend_unknown_type():
    with pytest.raises(ConfigurationError, match="Unsupported backend type"):
        create_storage_backend("tape", {"baseDirectory": "/tmp"})


def _database_store_config() -> StoreConfig:
    return StoreConfig(
        type="database",
        data={"database": {"type": "mongomock", "prefix": f"cdmiqos_test_{uuid.uuid4().hex}", "data": {}}},
    )


def test_close_lets_pending_transition_finish(base_dir, capabilities_file):
    backend_config = BackendConfig(**backend_config_dict(base_dir, capabilities_file, delay=0.3))
    store_config = _database_store_config()
    with Backend(backend_config, store_config, clock=FakeClock()) as backend:
        assert backend.request_transition("d", BRONZE).in_transition

    with Backend(backend_config, store_config, clock=FakeClock()) as backend:
        status = backend.get_status("d")
        assert status.current_capability_uri == BRONZE
        assert not status.in_transition
        assert backend.impl.timer.pending() == 0


def test_pending_transition_resumed_at_startup(base_dir, capabilities_file):
    backend_config = BackendConfig(**backend_config_dict(base_dir, capabilities_file, delay=0.05))
    store_config = _database_store_config()
    store = store_config.create_store()
    store.put("/d", ObjectStatus(current_capability_uri=GOLD, target_capability_uri=BRONZE))
    store.close()

    with Backend(backend_config, store_config, clock=FakeClock()) as backend:
        assert backend.impl.timer.pending() == 1
        assert backend.wait_for_transitions(timeout=5)
        status = backend.get_status("d")
        assert status.current_capability_uri == BRONZE
        assert not status.in_transition
        assert backend.request_transition("d", GOLD).target_capability_uri == GOLD
