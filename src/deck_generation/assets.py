from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Optional, Tuple

from .config import ServiceConfig
from .errors import AssetMissingError
from .layouts import ICON_FILES
from .models import DeckAssets

logger = logging.getLogger(__name__)


def encode_bytes(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def encode_file(path: Path) -> str:
    return encode_bytes(path.read_bytes())


class AssetProvider:
    """Reads the static assets from disk and hands them over base64 encoded."""

    def __init__(self, config: ServiceConfig) -> None:
        self.config = config

    @property
    def icon_paths(self) -> Tuple[Path, ...]:
        root = Path(self.config.icon_dir)
        return tuple(root / name for name in ICON_FILES)

    def load_icons(self) -> Tuple[str, ...]:
        icons = []
        for path in self.icon_paths:
            if not path.is_file():
                raise AssetMissingError(str(path))
            icons.append(encode_file(path))
        return tuple(icons)

    def load_logo(self) -> Optional[str]:
        path = Path(self.config.logo_path)
        if not path.is_file():
            logger.debug("Logo not found at %s; skipping logo overlay", path)
            return None
        return encode_file(path)

    def build_assets(self, user_image: Optional[bytes] = None) -> DeckAssets:
        return DeckAssets(
            icons=self.load_icons(),
            logo=self.load_logo(),
            user_image=encode_bytes(user_image) if user_image else None,
            theme_source=self.config.theme_source,
            theme_source_slide=self.config.theme_source_slide,
        )
