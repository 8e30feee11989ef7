"""
Unit tests for the streamhub configuration loader.
"""
from pathlib import Path

import pytest
import yaml

from streamhub.utils import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    """Run each test in an empty directory with a clean cache and environment."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "STREAMHUB_LOG_LEVEL",
        "STREAMHUB_PREFERENCES_PATH",
        "STREAMHUB_DEFAULT_SERVICE",
    ):
        monkeypatch.delenv(var, raising=False)
    config._CONFIG_CACHE = None
    yield
    config._CONFIG_CACHE = None


def test_defaults_without_file():
    cfg = config.get_config()
    assert cfg["logging"]["level"] == "info"
    assert cfg["preferences"]["path"] == "preferences.json"
    assert cfg["selection"]["default_service"] == "YouTube"


def test_file_values_merge_over_defaults(tmp_path: Path):
    """Verify a partial file only overrides the keys it sets."""
    (tmp_path / "streamhub.yaml").write_text(
        yaml.dump({"selection": {"default_service": "PeerTube"}})
    )
    cfg = config.get_config()
    assert cfg["selection"]["default_service"] == "PeerTube"
    assert cfg["preferences"]["path"] == "preferences.json"


def test_env_overrides_file(tmp_path: Path, monkeypatch):
    (tmp_path / "streamhub.yaml").write_text(yaml.dump({"logging": {"level": "warning"}}))
    monkeypatch.setenv("STREAMHUB_LOG_LEVEL", "debug")
    monkeypatch.setenv("STREAMHUB_PREFERENCES_PATH", "/tmp/prefs.json")
    cfg = config.get_config()
    assert cfg["logging"]["level"] == "debug"
    assert cfg["preferences"]["path"] == "/tmp/prefs.json"


def test_invalid_yaml_falls_back_to_defaults(tmp_path: Path):
    (tmp_path / "streamhub.yaml").write_text("logging: [unclosed\n")
    assert config.get_config() == config.DEFAULT_CONFIG


def test_non_mapping_section_is_ignored(tmp_path: Path):
    (tmp_path / "streamhub.yaml").write_text(yaml.dump({"logging": "loud"}))
    assert config.get_config()["logging"] == {"level": "info"}


def test_config_is_cached_until_reload(tmp_path: Path):
    """Verify the file is read once and re-read by reload_config()."""
    path = tmp_path / "streamhub.yaml"
    path.write_text(yaml.dump({"selection": {"default_service": "Bandcamp"}}))
    assert config.get_config()["selection"]["default_service"] == "Bandcamp"

    path.write_text(yaml.dump({"selection": {"default_service": "NicoNico"}}))
    assert config.get_config()["selection"]["default_service"] == "Bandcamp"
    assert config.reload_config()["selection"]["default_service"] == "NicoNico"


def test_defaults_are_not_mutated(monkeypatch):
    monkeypatch.setenv("STREAMHUB_DEFAULT_SERVICE", "SoundCloud")
    config.get_config()
    assert config.DEFAULT_CONFIG["selection"]["default_service"] == "YouTube"
