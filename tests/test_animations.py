# tests/test_animations.py

from src.deck_generation.animations import ANIMATION_STRATEGIES, bounce_cascade, fly_entrance
from src.deck_generation.models import ShapeRef, Trigger


def _refs(n, slide=2):
    return [ShapeRef(slide_index=slide, key=f"s.{i}") for i in range(n)]


def test_bounce_cascade_triggers():
    refs = _refs(4)
    effects = bounce_cascade(refs)
    assert [e.shape for e in effects] == refs
    assert effects[0].trigger is Trigger.ON_CLICK
    assert all(e.trigger is Trigger.WITH_PREVIOUS for e in effects[1:])
    assert {e.effect_type for e in effects} == {"Bounce"}
    assert {(e.acceleration, e.duration) for e in effects} == {(0.1, 0.5)}
    assert all(e.preset_class == "Entrance" for e in effects)


def test_fly_entrance_skips_first_shape():
    refs = _refs(3, slide=1)
    effects = fly_entrance(refs)
    assert [e.shape for e in effects] == refs[1:]
    assert [e.subtype for e in effects] == ["Bottom", "Right"]
    assert all(e.trigger is Trigger.ON_CLICK for e in effects)
    assert all(e.effect_type == "Fly" and e.duration == 1 for e in effects)


def test_fly_entrance_ignores_shapes_past_third():
    effects = fly_entrance(_refs(5))
    assert len(effects) == 2


def test_empty_input_is_noop():
    for strategy in ANIMATION_STRATEGIES.values():
        assert strategy([]) == []


def test_effects_keep_slide_of_shape():
    effects = bounce_cascade(_refs(2, slide=7))
    assert {e.slide_index for e in effects} == {7}
