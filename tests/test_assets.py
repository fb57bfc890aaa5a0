# tests/test_assets.py

import base64
from dataclasses import replace

import pytest

from src.deck_generation.assets import AssetProvider
from src.deck_generation.errors import AssetMissingError, ErrorKind


def test_icons_are_base64_encoded(config):
    icons = AssetProvider(config).load_icons()
    assert len(icons) == 4
    assert base64.b64decode(icons[0]) == b"bytes-of-Icon1.ico"


def test_missing_icon_raises(config, asset_dirs):
    (asset_dirs / "icon" / "Icon3.ico").unlink()
    with pytest.raises(AssetMissingError) as exc_info:
        AssetProvider(config).load_icons()
    assert exc_info.value.path.endswith("Icon3.ico")
    assert exc_info.value.kind is ErrorKind.ASSET_MISSING


def test_missing_logo_is_skipped(config):
    assert AssetProvider(config).load_logo() is None


def test_build_assets_with_logo_and_image(config, asset_dirs):
    logo = asset_dirs / "logo.jpg"
    logo.write_bytes(b"logo")
    provider = AssetProvider(replace(config, logo_path=str(logo), theme_source="Brand.pptx"))
    deck_assets = provider.build_assets(b"picture")
    assert base64.b64decode(deck_assets.logo) == b"logo"
    assert base64.b64decode(deck_assets.user_image) == b"picture"
    assert deck_assets.theme_source == "Brand.pptx"
    assert deck_assets.theme_source_slide == 1
