from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

PRESENTATION_EXTENSION = ".pptx"
TRANSPARENT = "#00000000"
BLACK = "#FF000000"


class ShapeKind(str, Enum):
    RECTANGLE = "Rectangle"
    ELLIPSE = "Ellipse"
    DIAMOND = "Diamond"
    PICTURE_FRAME = "PictureFrame"
    OLE_ICON_FRAME = "OleObjectFrame"


class Anchoring(str, Enum):
    TOP = "Top"
    CENTER = "Center"
    BOTTOM = "Bottom"


class Trigger(str, Enum):
    ON_CLICK = "OnClick"
    WITH_PREVIOUS = "WithPrevious"


class PageKind(str, Enum):
    TITLE = "title"
    CARDS = "cards"


@dataclass(frozen=True)
class DeckRequest:
    presentation_name: str
    slide_count: int
    layout_policy: str
    uploaded_image: Optional[bytes] = field(default=None, repr=False)


@dataclass(frozen=True)
class Geometry:
    """Position and size in points."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class LineSpec:
    color: str = TRANSPARENT
    width: float = 0
    style: Optional[str] = None  # "Single"
    dash_style: Optional[str] = None  # "Solid"


@dataclass(frozen=True)
class PictureSpec:
    base64_data: str = field(repr=False)
    fill_mode: str = "Stretch"


@dataclass(frozen=True)
class IconSpec:
    substitute_base64: str = field(repr=False)
    embedded_base64: str = field(repr=False)
    embedded_extension: str = "png"
    prog_id: str = "Paint.Picture"
    title: str = "Icon Preview"


@dataclass(frozen=True)
class TextStyleSpec:
    font_size: float
    bold: bool = False
    font_family: str = "Arial"
    font_color: str = BLACK
    justification: Optional[str] = None
    anchoring: Anchoring = Anchoring.TOP


@dataclass(frozen=True)
class ShapeSpec:
    slide_index: int
    kind: ShapeKind
    geometry: Geometry
    fill_color: Optional[str] = None  # None means no fill
    line: LineSpec = field(default_factory=LineSpec)
    text: Optional[str] = None
    alignment: Optional[str] = None
    picture: Optional[PictureSpec] = None
    icon: Optional[IconSpec] = None


@dataclass(frozen=True)
class ShapeRef:
    """Symbolic handle for a shape created earlier in the same plan."""

    slide_index: int
    key: str


@dataclass(frozen=True)
class AnimationEffect:
    slide_index: int
    shape: ShapeRef
    effect_type: str
    trigger: Trigger
    subtype: Optional[str] = None
    preset_class: str = "Entrance"
    acceleration: float = 0.1
    duration: float = 1


@dataclass(frozen=True)
class DeckAssets:
    """Base64 encoded inputs for one deck build; optional ones may be None."""

    icons: Tuple[str, ...] = ()
    logo: Optional[str] = field(default=None, repr=False)
    user_image: Optional[str] = field(default=None, repr=False)
    theme_source: Optional[str] = None
    theme_source_slide: int = 1


@dataclass(frozen=True)
class DeckOutcome:
    """Tagged result returned to callers; branch on ``error_kind`` not text."""

    ok: bool
    download_url: Optional[str] = None
    error_kind: Optional[str] = None
    message: Optional[str] = None
    field: Optional[str] = None

    @classmethod
    def success(cls, download_url: str) -> "DeckOutcome":
        return cls(ok=True, download_url=download_url)

    @classmethod
    def failure(cls, error_kind: str, message: str, field: Optional[str] = None) -> "DeckOutcome":
        return cls(ok=False, error_kind=error_kind, message=message, field=field)

    def to_json(self) -> dict:
        if self.ok:
            return {"success": True, "downloadUrl": self.download_url}
        payload = {"success": False, "message": self.message, "errorKind": self.error_kind}
        if self.field:
            payload["field"] = self.field
        return payload
