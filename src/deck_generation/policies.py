from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List

from .models import DeckRequest, PageKind


class LayoutPolicy(ABC):
    """Decides which page templates make up a deck, in slide order."""

    name: str = ""

    @abstractmethod
    def pages(self, request: DeckRequest) -> List[PageKind]:
        raise NotImplementedError


class FixedTemplatePolicy(LayoutPolicy):
    """Always the two-page template; the requested slide count is ignored."""

    name = "fixed-template"

    def pages(self, request: DeckRequest) -> List[PageKind]:
        return [PageKind.TITLE, PageKind.CARDS]


class UserCountPolicy(LayoutPolicy):
    """A title page followed by ``slide_count`` card pages."""

    name = "user-count"

    def pages(self, request: DeckRequest) -> List[PageKind]:
        return [PageKind.TITLE] + [PageKind.CARDS] * request.slide_count


LAYOUT_POLICIES: Dict[str, LayoutPolicy] = {
    policy.name: policy for policy in (FixedTemplatePolicy(), UserCountPolicy())
}

DEFAULT_POLICY = FixedTemplatePolicy.name


def get_policy(name: str) -> LayoutPolicy:
    try:
        return LAYOUT_POLICIES[name]
    except KeyError:
        raise KeyError(f"Unknown layout policy '{name}'. Available: {sorted(LAYOUT_POLICIES)}") from None
