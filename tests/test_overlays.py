# tests/test_overlays.py

from dataclasses import replace

from src.deck_generation.models import DeckRequest, ShapeKind
from src.deck_generation.operations import (
    CopyMasterSlide,
    CreateShape,
    CreateSlide,
    SetSlideTransition,
)
from src.deck_generation.overlays import decide_overlays
from src.deck_generation.planner_service import build_deck_plan
from src.deck_generation.units import inch_to_pt


def test_no_optional_assets_means_no_overlays(assets):
    overlays = decide_overlays(assets, [1, 2])
    assert overlays.theme == []
    assert overlays.background == {}
    assert overlays.foreground == []


def test_theme_copied_when_source_configured(assets):
    assets = replace(assets, theme_source="Brand.pptx", theme_source_slide=3)
    overlays = decide_overlays(assets, [1, 2])
    assert overlays.theme == [CopyMasterSlide(source="Brand.pptx", source_slide_index=3, apply_to_all=True)]


def test_logo_on_every_slide(assets):
    overlays = decide_overlays(replace(assets, logo="bG9nbw=="), [1, 2, 3])
    slides = [op.ref.slide_index for op in overlays.foreground]
    assert slides == [1, 2, 3]
    spec = overlays.foreground[0].spec
    assert spec.kind is ShapeKind.PICTURE_FRAME
    assert spec.picture.base64_data == "bG9nbw=="
    assert (spec.geometry.x, spec.geometry.width) == (inch_to_pt(0.1), inch_to_pt(1.03))


def test_user_image_on_every_slide_with_transition(assets):
    overlays = decide_overlays(replace(assets, user_image="aW1n"), [1, 2])
    assert list(overlays.background) == [1, 2]
    for slide_index, (picture, transition) in overlays.background.items():
        assert isinstance(picture, CreateShape)
        assert picture.ref.slide_index == slide_index
        assert picture.spec.geometry.height == inch_to_pt(7.5)
        assert isinstance(transition, SetSlideTransition)
        assert transition.slide_index == slide_index
        assert transition.transition_type == "Fade"


def test_user_count_deck_gets_image_on_card_slides(assets):
    request = DeckRequest(
        presentation_name="Deck.pptx",
        slide_count=3,
        layout_policy="user-count",
        uploaded_image=b"img",
    )
    ops = list(build_deck_plan(request, replace(assets, user_image="aW1n")))

    transitions = [op.slide_index for op in ops if isinstance(op, SetSlideTransition)]
    assert transitions == [1, 2, 3, 4]
    images = [op for op in ops if isinstance(op, CreateShape) and op.ref.key.startswith("user-image")]
    assert [op.ref.slide_index for op in images] == [1, 2, 3, 4]
    first_on_slide = {}
    for op in ops:
        if isinstance(op, CreateShape):
            first_on_slide.setdefault(op.ref.slide_index, op.ref.key)
    assert all(key.startswith("user-image") for key in first_on_slide.values())


def test_overlay_positions_in_plan(assets):
    assets = replace(assets, logo="bG9nbw==", user_image="aW1n", theme_source="Brand.pptx")
    request = DeckRequest(presentation_name="Deck.pptx", slide_count=2, layout_policy="fixed-template")
    ops = list(build_deck_plan(request, assets))

    theme_pos = next(i for i, op in enumerate(ops) if isinstance(op, CopyMasterSlide))
    slide_pos = next(i for i, op in enumerate(ops) if isinstance(op, CreateSlide))
    assert theme_pos < slide_pos

    shapes = [op for op in ops if isinstance(op, CreateShape)]
    slide1 = [op for op in shapes if op.ref.slide_index == 1]
    assert slide1[0].ref.key.startswith("user-image")
    assert [op.ref.key for op in shapes[-2:]] == ["logo.0", "logo.0"]
    assert [op.ref.slide_index for op in shapes[-2:]] == [1, 2]
