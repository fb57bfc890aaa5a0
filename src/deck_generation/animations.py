from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from .models import AnimationEffect, ShapeRef, Trigger

FLY_SUBTYPES = {1: "Bottom", 2: "Right"}

AnimationStrategy = Callable[[Sequence[ShapeRef]], List[AnimationEffect]]


def fly_entrance(shape_ids: Sequence[ShapeRef]) -> List[AnimationEffect]:
    """Fly the second and third shapes in on click; the rest stay static."""

    effects: List[AnimationEffect] = []
    for position, ref in enumerate(shape_ids):
        subtype = FLY_SUBTYPES.get(position)
        if subtype is None:
            continue
        effects.append(
            AnimationEffect(
                slide_index=ref.slide_index,
                shape=ref,
                effect_type="Fly",
                subtype=subtype,
                trigger=Trigger.ON_CLICK,
                acceleration=0.1,
                duration=1,
            )
        )
    return effects


def bounce_cascade(shape_ids: Sequence[ShapeRef]) -> List[AnimationEffect]:
    """Bounce every shape in: the first on click, the others with the previous one."""

    return [
        AnimationEffect(
            slide_index=ref.slide_index,
            shape=ref,
            effect_type="Bounce",
            trigger=Trigger.ON_CLICK if idx == 0 else Trigger.WITH_PREVIOUS,
            acceleration=0.1,
            duration=0.5,
        )
        for idx, ref in enumerate(shape_ids)
    ]


ANIMATION_STRATEGIES: Dict[str, AnimationStrategy] = {
    "fly-entrance": fly_entrance,
    "bounce-cascade": bounce_cascade,
}
