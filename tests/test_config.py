# tests/test_config.py

import pytest

from src.deck_generation.config import ServiceConfig


def test_from_env(monkeypatch):
    monkeypatch.setattr("src.deck_generation.config.load_dotenv", lambda: None)
    monkeypatch.setenv("ASPOSE_CLIENT_ID", "client")
    monkeypatch.setenv("ASPOSE_CLIENT_SECRET", "secret")
    monkeypatch.setenv("ASPOSE_DOWNLOAD_BASE", "https://example.test/v3.0/")
    monkeypatch.setenv("DECK_THEME_SOURCE", "Brand.pptx")
    monkeypatch.setenv("DECK_LAYOUT_POLICY", "user-count")
    monkeypatch.setenv("DECK_MAX_SLIDE_COUNT", "8")

    config = ServiceConfig.from_env()
    assert config.has_credentials
    assert config.download_base == "https://example.test/v3.0"
    assert config.theme_source == "Brand.pptx"
    assert config.default_policy == "user-count"
    assert config.max_slide_count == 8


def test_defaults_without_env(monkeypatch):
    monkeypatch.setattr("src.deck_generation.config.load_dotenv", lambda: None)
    for name in ("ASPOSE_CLIENT_ID", "ASPOSE_CLIENT_SECRET", "DECK_THEME_SOURCE", "DECK_LAYOUT_POLICY"):
        monkeypatch.delenv(name, raising=False)

    config = ServiceConfig.from_env()
    assert not config.has_credentials
    assert config.theme_source is None
    assert config.folder == ""
    assert config.default_policy == "fixed-template"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setattr("src.deck_generation.config.load_dotenv", lambda: None)
    monkeypatch.setenv("ASPOSE_STORAGE", "  ")
    monkeypatch.setenv("DECK_ICON_DIR", "")
    monkeypatch.setenv("DECK_LAYOUT_POLICY", "")

    config = ServiceConfig.from_env()
    assert config.storage is None
    assert config.icon_dir == "icon"
    assert config.default_policy == "fixed-template"


def test_unknown_layout_policy_rejected_at_startup(monkeypatch):
    monkeypatch.setattr("src.deck_generation.config.load_dotenv", lambda: None)
    monkeypatch.setenv("DECK_LAYOUT_POLICY", "fixed")
    with pytest.raises(ValueError, match="DECK_LAYOUT_POLICY"):
        ServiceConfig.from_env()
