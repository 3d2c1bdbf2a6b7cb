"""Tests for configuration loading."""

import pytest
import yaml

from exiframe.config import DEFAULT_CONFIG, ConfigError, ConfigManager


def test_defaults_without_config_file(isolated_home):
    config = ConfigManager.load()

    assert config.config_path is None
    assert config.get("frame.margin") == 16
    assert config.get("frame.show_focal_length_in_35mm_film") is False
    assert config.get("web.port") == 5050


def test_load_merges_with_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"frame": {"margin": 32, "text_color": "gray"}}))

    config = ConfigManager.load(str(path))

    assert config.config_path == path
    assert config.get("frame.margin") == 32
    assert config.get("frame.text_color") == "gray"
    assert config.get("frame.font_size") == 14
    assert config.get("session.max_workers") == 2


def test_load_does_not_mutate_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"frame": {"margin": 0}}))

    config = ConfigManager.load(str(path))
    config.set("frame.font_size", 40)

    assert DEFAULT_CONFIG["frame"]["margin"] == 16
    assert DEFAULT_CONFIG["frame"]["font_size"] == 14


def test_finds_config_in_home(isolated_home):
    config_dir = isolated_home / ".exiframe"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("frame:\n  font_size: 20\n")

    config = ConfigManager.load()
    assert config.get("frame.font_size") == 20
    assert config.config_path == config_dir / "config.yaml"


def test_finds_config_in_working_directory(isolated_home):
    (isolated_home / "config.yaml").write_text("web:\n  port: 8080\n")
    assert ConfigManager.load().get("web.port") == 8080


def test_empty_file_means_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert ConfigManager.load(str(path)).get("frame.margin") == 16


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        ConfigManager.load(str(tmp_path / "missing.yaml"))


def test_create_if_missing_writes_defaults(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    config = ConfigManager.load(str(path), create_if_missing=True)

    assert path.exists()
    assert config.config_path == path
    assert yaml.safe_load(path.read_text())["frame"]["margin"] == 16


@pytest.mark.parametrize("content, message", [
    ("frame: [unclosed", "Failed to parse YAML"),
    ("- just\n- a list\n", "must be a YAML dictionary"),
])
def test_invalid_files(tmp_path, content, message):
    path = tmp_path / "config.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError, match=message):
        ConfigManager.load(str(path))


@pytest.mark.parametrize("section, key, value", [
    ("frame", "margin", -1),
    ("frame", "font_size", 0),
    ("frame", "max_image_width", "wide"),
    ("session", "max_workers", 0),
    ("web", "port", True),
])
def test_invalid_values(tmp_path, section, key, value):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({section: {key: value}}))
    with pytest.raises(ConfigError, match=f"{section}.{key}"):
        ConfigManager.load(str(path))


def test_get_and_set():
    config = ConfigManager.defaults()
    config.set("frame.margin", 4)
    config.set("custom.nested.value", "x")

    assert config.get("frame.margin") == 4
    assert config.get("custom.nested.value") == "x"
    assert config.get("frame.missing", "fallback") == "fallback"
    assert config.get("frame.margin.too.deep") is None


def test_save_round_trip(tmp_path):
    config = ConfigManager.defaults()
    config.set("frame.background_color", "black")
    path = tmp_path / "saved.yaml"

    config.save(str(path))

    assert config.config_path == path
    assert ConfigManager.load(str(path)).get("frame.background_color") == "black"


def test_save_without_path():
    with pytest.raises(ConfigError, match="No configuration path"):
        ConfigManager.defaults().save()
