import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .policies import DEFAULT_POLICY, LAYOUT_POLICIES
from .validator import DEFAULT_MAX_SLIDE_COUNT

DEFAULT_DOWNLOAD_BASE = "https://api.aspose.cloud/v3.0"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    # Blank values (`FOO=` in .env) count as unset.
    val = (os.environ.get(name) or "").strip()
    return val or default


@dataclass(frozen=True)
class ServiceConfig:
    """Process-wide settings for the deck service.

    Built once at app start (``create_app``) and read-only afterwards; the
    remote client is created from it lazily on first use.

    Env:
      - ASPOSE_CLIENT_ID / ASPOSE_CLIENT_SECRET: cloud API credentials
      - ASPOSE_FOLDER, ASPOSE_STORAGE: remote folder and storage name
      - DECK_THEME_SOURCE (optional): reference deck whose master slide is cloned
      - DECK_LOGO_PATH, DECK_ICON_DIR, DECK_UPLOAD_FOLDER: local assets
      - DECK_LAYOUT_POLICY, DECK_MAX_SLIDE_COUNT: request defaults
    """

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    folder: str = ""
    storage: Optional[str] = None
    download_base: str = DEFAULT_DOWNLOAD_BASE
    theme_source: Optional[str] = None
    theme_source_slide: int = 1
    logo_path: str = os.path.join("public", "images", "logo.jpg")
    icon_dir: str = "icon"
    upload_folder: str = "uploads"
    default_policy: str = DEFAULT_POLICY
    max_slide_count: int = DEFAULT_MAX_SLIDE_COUNT

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        load_dotenv()
        defaults = cls()
        policy = _get_env("DECK_LAYOUT_POLICY", defaults.default_policy)
        if policy not in LAYOUT_POLICIES:
            raise ValueError(f"DECK_LAYOUT_POLICY must be one of {sorted(LAYOUT_POLICIES)}, got '{policy}'")
        return cls(
            client_id=_get_env("ASPOSE_CLIENT_ID"),
            client_secret=_get_env("ASPOSE_CLIENT_SECRET"),
            folder=_get_env("ASPOSE_FOLDER", defaults.folder),
            storage=_get_env("ASPOSE_STORAGE"),
            download_base=_get_env("ASPOSE_DOWNLOAD_BASE", defaults.download_base).rstrip("/"),
            theme_source=_get_env("DECK_THEME_SOURCE"),
            theme_source_slide=int(_get_env("DECK_THEME_SOURCE_SLIDE", "1")),
            logo_path=_get_env("DECK_LOGO_PATH", defaults.logo_path),
            icon_dir=_get_env("DECK_ICON_DIR", defaults.icon_dir),
            upload_folder=_get_env("DECK_UPLOAD_FOLDER", defaults.upload_folder),
            default_policy=policy,
            max_slide_count=int(_get_env("DECK_MAX_SLIDE_COUNT", str(defaults.max_slide_count))),
        )
