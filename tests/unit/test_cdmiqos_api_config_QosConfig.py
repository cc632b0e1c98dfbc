"""Unit tests for cdmiqos.api.config.QosConfig module."""

import json

import pytest

from cdmiqos.api.backend.BackendError import ConfigurationError
from cdmiqos.api.config.get_home_dir import get_home_dir
from cdmiqos.api.config.QosConfig import QosConfig


def test_get_home_dir_from_env(qos_home):
    assert get_home_dir() == qos_home
    assert QosConfig.get_config_path() == qos_home / "config.json"


def test_get_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("CDMIQOS_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == tmp_path / ".cdmiqos"


def test_load(qos_home, base_dir):
    config = QosConfig.load()
    assert config.backend.type == "filesystem"
    assert config.backend.data.base_directory == str(base_dir)  # type: ignore[attr-defined]
    assert config.store.type == "memory"
    assert config.log.level == "DEBUG"


def test_load_defaults_store_and_log(qos_home, base_dir):
    (qos_home / "config.json").write_text(
        json.dumps({"backend": {"type": "filesystem", "data": {"baseDirectory": str(base_dir)}}})
    )
    config = QosConfig.load()
    assert config.store.type == "memory"
    assert config.log.level == "INFO"


def test_load_missing_file(qos_home):
    (qos_home / "config.json").unlink()
    with pytest.raises(ConfigurationError, match="not found"):
        QosConfig.load()


def test_load_invalid_json(qos_home):
    (qos_home / "config.json").write_text("{")
    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        QosConfig.load()


def test_load_not_an_object(qos_home):
    (qos_home / "config.json").write_text("[]")
    with pytest.raises(ConfigurationError, match="JSON object"):
        QosConfig.load()


def test_load_missing_base_directory(qos_home):
    (qos_home / "config.json").write_text(json.dumps({"backend": {"type": "filesystem", "data": {}}}))
    with pytest.raises(ConfigurationError, match="Configuration validation error"):
        QosConfig.load()


def test_load_rejects_unknown_section(qos_home, base_dir):
    raw = json.loads((qos_home / "config.json").read_text())
    raw["metrics"] = {}
    (qos_home / "config.json").write_text(json.dumps(raw))
    with pytest.raises(ConfigurationError, match="metrics"):
        QosConfig.load()


def test_save_roundtrip(qos_home):
    config = QosConfig.load()
    (qos_home / "config.json").unlink()
    config.save()
    assert not (qos_home / "config.json.tmp").exists()
    saved = json.loads((qos_home / "config.json").read_text())
    assert "baseDirectory" in saved["backend"]["data"]
    assert QosConfig.load() == config
