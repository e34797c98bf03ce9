"""Tests for the INI settings manager."""

from pathlib import Path

import pytest

from iowalk.config import Paths, SettingsManager
from iowalk.config.parser import strip_inline_comment
from iowalk.exceptions import ConfigurationError


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Settings path inside a fresh config directory."""
    return tmp_path / "config" / "settings.conf"


def test_defaults_without_file(settings_file: Path):
    """Test built-in defaults are used when no file exists."""
    settings = SettingsManager(settings_file).load_settings()

    assert settings["config_version"] == "1.0.0"
    assert settings["log_level"] == "INFO"
    assert settings["console_log_level"] == "WARNING"
    assert settings["staging"]["placeholder_count"] == 100_000
    assert settings["staging"]["name_template"] == "hi{index}.txt"
    assert settings["staging"]["target"] == (
        Path.home() / "iowalk" / "staging" / "hi1.txt"
    )
    assert settings["streams"]["source"] == Path("video.mov")
    assert settings["streams"]["batch_size"] == 1024
    assert settings["streams"]["buffer_size"] == 8192
    assert not settings_file.exists()


def test_file_overrides_defaults(settings_file: Path):
    """Test values in the file replace the defaults they name."""
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text(
        "[DEFAULT]\n"
        "console_log_level = debug\n"
        "[staging]\n"
        "placeholder_count = 3  # small run\n"
        "name_template = file_{index}.dat\n"
        "[streams]\n"
        "batch_size = 4096\n",
        encoding="utf-8",
    )

    settings = SettingsManager(settings_file).load_settings()

    assert settings["console_log_level"] == "DEBUG"
    assert settings["staging"]["placeholder_count"] == 3
    assert settings["staging"]["name_template"] == "file_{index}.dat"
    assert settings["streams"]["batch_size"] == 4096
    assert settings["streams"]["buffer_size"] == 8192


@pytest.mark.parametrize(
    "body",
    [
        "[staging]\nplaceholder_count = many\n",
        "[staging]\nplaceholder_count = -5\n",
        "[staging]\nname_template = fixed.txt\n",
        "[staging]\nname_template = hi{index}-{x}.txt\n",
        "[staging]\nname_template = {index}{}\n",
        "[streams]\nbuffer_size = 1.5\n",
        "[DEFAULT]\nlog_level = LOUD\n",
        "not an ini file\n",
    ],
)
def test_invalid_values_raise(settings_file: Path, body: str):
    """Test malformed files and values raise ConfigurationError."""
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text(body, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        SettingsManager(settings_file).load_settings()


def test_save_then_load(settings_file: Path):
    """Test saved settings load back unchanged."""
    manager = SettingsManager(settings_file)
    settings = manager.load_settings()
    settings["staging"]["placeholder_count"] = 7
    settings["streams"]["destination"] = Path("/tmp/out.mov")

    written = manager.save_settings(settings)

    assert written == settings_file
    text = settings_file.read_text(encoding="utf-8")
    assert text.startswith("# iowalk configuration")
    assert "[staging]" in text
    assert "name_template = hi{index}.txt" in text

    reloaded = SettingsManager(settings_file).load_settings()
    assert reloaded["staging"]["placeholder_count"] == 7
    assert reloaded["streams"]["destination"] == Path("/tmp/out.mov")
    assert reloaded["config_version"] == "1.0.0"


def test_save_failure_raises(tmp_path: Path):
    """Test an unwritable location raises ConfigurationError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")
    manager = SettingsManager(blocker / "settings.conf")

    with pytest.raises(ConfigurationError):
        manager.save_settings(manager.load_settings())


def test_config_dir_env_override(monkeypatch, tmp_path: Path):
    """Test IOWALK_CONFIG_DIR relocates the settings file."""
    monkeypatch.setenv("IOWALK_CONFIG_DIR", str(tmp_path))

    assert Paths.settings_file() == tmp_path / "settings.conf"
    assert SettingsManager().settings_file == tmp_path / "settings.conf"


def test_config_dir_default(monkeypatch):
    """Test the default config directory is ~/.config/iowalk."""
    monkeypatch.delenv("IOWALK_CONFIG_DIR", raising=False)

    assert Paths.config_dir() == Path.home() / ".config" / "iowalk"


def test_strip_inline_comment():
    """Test trailing comments are removed from values."""
    assert strip_inline_comment("1.0.0  # DO NOT MODIFY") == "1.0.0"
    assert strip_inline_comment("plain") == "plain"
