from __future__ import annotations

from typing import List, Sequence

from . import layouts
from .animations import ANIMATION_STRATEGIES
from .errors import AssetMissingError
from .models import ShapeRef
from .operations import Operation, SetAnimation
from .shapes import SlideBuilder


def _animation(slide_index: int, strategy: str, refs: Sequence[ShapeRef]) -> List[Operation]:
    effects = ANIMATION_STRATEGIES[strategy](refs)
    if not effects:
        return []
    return [SetAnimation(slide_index=slide_index, effects=tuple(effects), strategy=strategy)]


def title_page(slide_index: int) -> List[Operation]:
    builder = SlideBuilder(slide_index)
    for template in layouts.TITLE_RECTANGLES:
        builder.add_shape(template, prefix="rect")
    text_refs = [builder.add_text_box(box, prefix="text") for box in layouts.TITLE_TEXT_BOXES]
    return builder.operations + _animation(slide_index, "fly-entrance", text_refs)


def card_page(slide_index: int, icons: Sequence[str]) -> List[Operation]:
    if len(icons) < len(layouts.CARD_ICONS):
        missing = layouts.ICON_FILES[len(icons)]
        raise AssetMissingError(missing, f"Icon file not found: {missing}")

    builder = SlideBuilder(slide_index)
    for template in layouts.CARD_BANDS:
        builder.add_shape(template, prefix="band")
    builder.add_shape(layouts.CARD_DIVIDER, prefix="divider")
    for template in layouts.CARD_CIRCLES:
        builder.add_shape(template, prefix="circle")
    for template in layouts.CARD_DIAMONDS:
        builder.add_shape(template, prefix="diamond")
    for frame, icon in zip(layouts.CARD_ICONS, icons):
        builder.add_icon(frame, icon)

    animated: List[ShapeRef] = []
    animated.extend(builder.add_shape(t, prefix="card") for t in layouts.CARD_PANELS)
    animated.extend(builder.add_text_box(t, prefix="card-title") for t in layouts.CARD_TITLES)
    animated.extend(builder.add_text_box(t, prefix="card-text") for t in layouts.CARD_PARAGRAPHS)
    return builder.operations + _animation(slide_index, "bounce-cascade", animated)
