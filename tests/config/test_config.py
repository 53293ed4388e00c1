import pytest

from recordstore.config import Config
from recordstore.config.core import Core
from recordstore.config.loader import CONFIG_PATH_ENV, load_settings, resolve_config_path
from recordstore.config.store import Store


def test_module_config_reads_environment():
    assert Config.core.DISCORD_API_TOKEN == "test-token"
    assert Config.core.STORE_CHANNEL_ID == 123


def test_core_prefers_toml_and_custom_token_env(monkeypatch):
    monkeypatch.setenv("ALT_TOKEN", "alt-token")
    core = Core({"discord": {"token_env": "ALT_TOKEN", "channel_id": 987}})

    assert core.DISCORD_API_TOKEN == "alt-token"
    assert core.STORE_CHANNEL_ID == 987


def test_core_reports_missing_values(monkeypatch):
    monkeypatch.delenv("DISCORD_API_TOKEN", raising=False)
    monkeypatch.delenv("STORE_CHANNEL_ID", raising=False)

    with pytest.raises(ValueError) as info:
        Core({})
    assert "DISCORD_API_TOKEN" in str(info.value)
    assert "STORE_CHANNEL_ID" in str(info.value)


def test_store_defaults(monkeypatch):
    for name in ("MAX_CONTENT_LENGTH", "MAX_ATTACHMENT_MB", "ATTACHMENT_FILENAME", "DOWNLOAD_TIMEOUT_S"):
        monkeypatch.delenv(name, raising=False)
    store = Store({})

    assert store.MAX_CONTENT_LENGTH == 2000
    assert store.MAX_ATTACHMENT_MB == 25
    assert store.max_attachment_bytes == 25 * 1024 * 1024
    assert store.ATTACHMENT_FILENAME == "data"
    assert store.DOWNLOAD_TIMEOUT_S == 60.0


def test_store_env_and_toml_overrides(monkeypatch):
    monkeypatch.setenv("MAX_ATTACHMENT_MB", "8")
    store = Store({"store": {"max_content_length": 4000}})

    assert store.MAX_CONTENT_LENGTH == 4000
    assert store.MAX_ATTACHMENT_MB == 8


def test_load_settings_returns_recordstore_table(tmp_path):
    assert load_settings(tmp_path / "missing.toml") == {}

    cfg = tmp_path / "config.toml"
    cfg.write_text(
        """
[other]
ignored = true

[recordstore.discord]
channel_id = 55

[recordstore.store]
attachment_filename = "payload.bin"
"""
    )
    settings = load_settings(cfg)

    assert "other" not in settings
    assert Core(settings).STORE_CHANNEL_ID == 55
    assert Store(settings).ATTACHMENT_FILENAME == "payload.bin"


def test_load_settings_without_section(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text("[other]\nvalue = 1\n")
    assert load_settings(cfg) == {}


def test_config_path_env_override(tmp_path, monkeypatch):
    cfg = tmp_path / "custom.toml"
    cfg.write_text("[recordstore.store]\nmax_attachment_mb = 8\n")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(cfg))

    assert resolve_config_path() == cfg
    assert Store(load_settings()).MAX_ATTACHMENT_MB == 8
    assert resolve_config_path(tmp_path / "explicit.toml") == tmp_path / "explicit.toml"


def test_config_path_defaults_to_cwd(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    assert resolve_config_path().name == "config.toml"
