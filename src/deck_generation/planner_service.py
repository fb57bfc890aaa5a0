from __future__ import annotations

import logging
from typing import List, Optional

from .models import DeckAssets, DeckRequest, PageKind
from .operations import CreatePresentation, CreateSlide, DeckPlan, Operation, SetSlideProperties
from .overlays import decide_overlays
from .pages import card_page, title_page
from .policies import LayoutPolicy, get_policy

logger = logging.getLogger(__name__)


def build_deck_plan(
    request: DeckRequest,
    assets: DeckAssets,
    policy: Optional[LayoutPolicy] = None,
) -> DeckPlan:
    """Turn a validated request into the ordered operations for the remote service.

    Pure: no I/O, no clock, no randomness. Slide 1 comes with the new
    presentation; every further page gets its own ``CreateSlide``.
    """

    policy = policy or get_policy(request.layout_policy)
    pages = policy.pages(request)
    slide_indices = list(range(1, len(pages) + 1))
    overlays = decide_overlays(assets, slide_indices)

    operations: List[Operation] = [
        CreatePresentation(name=request.presentation_name),
        SetSlideProperties(),
    ]
    operations.extend(overlays.theme)
    operations.extend(CreateSlide(slide_index=idx) for idx in slide_indices[1:])

    for slide_index, page in zip(slide_indices, pages):
        operations.extend(overlays.background.get(slide_index, []))
        if page is PageKind.TITLE:
            operations.extend(title_page(slide_index))
        else:
            operations.extend(card_page(slide_index, assets.icons))

    operations.extend(overlays.foreground)

    plan = DeckPlan(presentation_name=request.presentation_name, operations=tuple(operations))
    logger.debug(
        "Planned %s with policy %s: %d slides, %d operations",
        request.presentation_name,
        policy.name,
        len(pages),
        len(plan),
    )
    return plan
