"""Fixed design data for the two page templates. All lengths are inches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .models import Anchoring, ShapeKind

YELLOW = "#FFFFCA08"
PALE_YELLOW = "#FFFFDF6B"
LIGHT_GRAY = "#FFF2F2F2"
PURPLE = "#FF9641E7"
PINK = "#FFEF476B"


@dataclass(frozen=True)
class ShapeTemplate:
    kind: ShapeKind
    x: float
    y: float
    width: float
    height: float
    color: Optional[str] = None
    line_color: Optional[str] = None  # defaults to ``color``
    line_style: Optional[str] = None


@dataclass(frozen=True)
class TextBoxTemplate:
    text: str
    x: float
    y: float
    width: float
    height: float
    font_size: float
    bold: bool
    alignment: str
    anchoring: Anchoring
    justification: Optional[str] = None


@dataclass(frozen=True)
class FrameTemplate:
    x: float
    y: float
    width: float
    height: float


# ---- Title page ----
TITLE_IMAGE_PANEL = FrameTemplate(x=0, y=0, width=4.27, height=7.5)

TITLE_RECTANGLES: Tuple[ShapeTemplate, ...] = (
    ShapeTemplate(ShapeKind.RECTANGLE, 0, 1.89, 0.71, 2.14, YELLOW, line_style="Single"),
    ShapeTemplate(ShapeKind.RECTANGLE, 0, 6.68, 2.26, 0.82, YELLOW, line_style="Single"),
    ShapeTemplate(ShapeKind.RECTANGLE, 4.28, 0, 9.07, 4.4, YELLOW, line_style="Single"),
)

TITLE_TEXT_BOXES: Tuple[TextBoxTemplate, ...] = (
    TextBoxTemplate(
        "Title Overview", 5.53, 0.33, 7.07, 3.95,
        font_size=54, bold=True, alignment="Left",
        anchoring=Anchoring.BOTTOM, justification="LeftJustified",
    ),
    TextBoxTemplate(
        "Enter Overview Details in a Form of Heading", 5.53, 4.61, 7.07, 1.63,
        font_size=24, bold=False, alignment="Left",
        anchoring=Anchoring.TOP, justification="LeftJustified",
    ),
    TextBoxTemplate(
        "Presenter Name", 5.54, 6.68, 2.3, 0.33,
        font_size=16, bold=False, alignment="Left",
        anchoring=Anchoring.CENTER, justification="LeftJustified",
    ),
)

# ---- Card page ----
CARD_BANDS: Tuple[ShapeTemplate, ...] = (
    ShapeTemplate(ShapeKind.RECTANGLE, 0, 0, 8.5, 0.38, YELLOW, line_style="Single"),
    ShapeTemplate(ShapeKind.RECTANGLE, 8.4, 0, 4.95, 0.38, PALE_YELLOW, line_style="Single"),
    ShapeTemplate(ShapeKind.RECTANGLE, 0, 7.12, 4.95, 0.38, PALE_YELLOW, line_style="Single"),
    ShapeTemplate(ShapeKind.RECTANGLE, 4.95, 7.12, 8.4, 0.38, YELLOW, line_style="Single"),
)

CARD_DIVIDER = ShapeTemplate(ShapeKind.RECTANGLE, 0, 2.08, 13.34, 0.12, LIGHT_GRAY)

CARD_CIRCLES: Tuple[ShapeTemplate, ...] = tuple(
    ShapeTemplate(ShapeKind.ELLIPSE, x, 2.05, 0.2, 0.2, color)
    for x, color in ((2.29, PURPLE), (5.18, PINK), (7.98, PURPLE), (10.88, PINK))
)

CARD_DIAMONDS: Tuple[ShapeTemplate, ...] = tuple(
    ShapeTemplate(ShapeKind.DIAMOND, x, 2.21, 0.88, 0.88, color)
    for x, color in ((1.95, PURPLE), (4.84, PINK), (7.64, PURPLE), (10.53, PINK))
)

CARD_ICONS: Tuple[FrameTemplate, ...] = tuple(
    FrameTemplate(x, 2.37, 0.53, 0.53) for x in (2.12, 4.94, 7.8, 10.69)
)

ICON_FILES: Tuple[str, ...] = ("Icon1.ico", "Icon2.ico", "Icon3.ico", "Icon4.ico")

CARD_PANELS: Tuple[ShapeTemplate, ...] = tuple(
    ShapeTemplate(ShapeKind.RECTANGLE, x, 3.36, 2.66, 2.79, LIGHT_GRAY, line_color="#00000000")
    for x in (1.05, 3.93, 6.76, 9.64)
)

CARD_TITLES: Tuple[TextBoxTemplate, ...] = tuple(
    TextBoxTemplate(
        "Enter Title Here", x, 3.55, 2.66, 0.44,
        font_size=20, bold=True, alignment="Center", anchoring=Anchoring.CENTER,
    )
    for x in (1.07, 3.93, 6.76, 9.64)
)

CARD_PARAGRAPHS: Tuple[TextBoxTemplate, ...] = tuple(
    TextBoxTemplate(
        "Paragraph for the description is placed here.....", x, 4.11, 1.95, 0.81,
        font_size=14, bold=False, alignment="Left",
        anchoring=Anchoring.TOP, justification="LeftJustified",
    )
    for x in (1.37, 4.28, 7.11, 9.99)
)

# ---- Overlays ----
LOGO_FRAME = FrameTemplate(x=0.1, y=0.1, width=1.03, height=0.9)

# 1x1 transparent PNG embedded behind each icon frame.
EMPTY_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
