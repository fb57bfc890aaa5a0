from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .layouts import LOGO_FRAME, TITLE_IMAGE_PANEL
from .models import DeckAssets
from .operations import CopyMasterSlide, Operation, SetSlideTransition
from .shapes import SlideBuilder


@dataclass
class OverlayPlan:
    """Extra operations grouped by where they go in the deck plan.

    ``theme`` follows presentation creation, ``background`` is prepended to
    a slide's own shapes, ``foreground`` is appended after all slides.
    """

    theme: List[Operation] = field(default_factory=list)
    background: Dict[int, List[Operation]] = field(default_factory=dict)
    foreground: List[Operation] = field(default_factory=list)


def decide_overlays(
    assets: DeckAssets,
    slide_indices: Iterable[int],
) -> OverlayPlan:
    """Group the optional deck-wide operations by where they land in the plan.

    The uploaded image sits behind every slide's own shapes, each slide
    getting a transition; the logo is stamped on top of every slide.
    """

    plan = OverlayPlan()
    slides = list(slide_indices)

    if assets.theme_source:
        plan.theme.append(
            CopyMasterSlide(
                source=assets.theme_source,
                source_slide_index=assets.theme_source_slide,
                apply_to_all=True,
            )
        )

    if assets.user_image:
        for slide_index in slides:
            builder = SlideBuilder(slide_index)
            builder.add_picture(TITLE_IMAGE_PANEL, assets.user_image, prefix="user-image")
            builder.operations.append(SetSlideTransition(slide_index=slide_index))
            plan.background[slide_index] = builder.operations

    if assets.logo:
        for slide_index in slides:
            builder = SlideBuilder(slide_index)
            builder.add_picture(LOGO_FRAME, assets.logo, prefix="logo")
            plan.foreground.extend(builder.operations)

    return plan
