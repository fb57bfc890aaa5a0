# tests/test_linking.py

from types import SimpleNamespace

import pytest

from src.deck_generation.errors import ShapeResolutionError
from src.deck_generation.linking import ShapeLinks, resolve_shape_index
from src.deck_generation.models import ShapeRef


def test_index_field_wins():
    assert resolve_shape_index(SimpleNamespace(index=4, self_uri=None)) == 4
    assert resolve_shape_index({"index": "6"}) == 6


def test_index_parsed_from_self_uri():
    response = SimpleNamespace(
        index=None,
        self_uri=SimpleNamespace(href="https://api.aspose.cloud/v3.0/slides/Deck.pptx/slides/2/shapes/17"),
    )
    assert resolve_shape_index(response) == 17
    assert resolve_shape_index({"selfUri": {"href": "/slides/1/shapes/3"}}) == 3


@pytest.mark.parametrize(
    "response",
    [
        None,
        {},
        SimpleNamespace(index=None, self_uri=None),
        SimpleNamespace(index=None, self_uri=SimpleNamespace(href="/slides/1")),
        {"index": "abc"},
    ],
)
def test_unresolvable_response(response):
    with pytest.raises(ShapeResolutionError):
        resolve_shape_index(response)


def test_links_bind_and_resolve():
    links = ShapeLinks()
    ref = ShapeRef(slide_index=1, key="text.0")
    links.bind(ref, 5)
    assert links.resolve(ref) == 5
    assert ref in links
    assert len(links) == 1


def test_links_reject_unknown_and_duplicate():
    links = ShapeLinks()
    ref = ShapeRef(slide_index=2, key="card.0")
    with pytest.raises(ShapeResolutionError):
        links.resolve(ref)
    links.bind(ref, 1)
    with pytest.raises(ShapeResolutionError):
        links.bind(ref, 2)
