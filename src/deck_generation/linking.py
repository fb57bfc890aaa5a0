from __future__ import annotations

import re
from typing import Any, Dict

from .errors import ShapeResolutionError
from .models import ShapeRef

_SHAPE_HREF = re.compile(r"shapes/(\d+)")


def resolve_shape_index(response: Any) -> int:
    """Pull the shape index out of a create-shape response.

    Uses the ``index`` field when the service fills it, otherwise parses the
    ``selfUri`` link (``.../slides/2/shapes/7``).
    """

    if response is None:
        raise ShapeResolutionError("Empty response from shape creation")

    index = response.get("index") if isinstance(response, dict) else getattr(response, "index", None)
    if index is not None:
        try:
            return int(index)
        except (TypeError, ValueError) as exc:
            raise ShapeResolutionError(f"Unparseable shape index: {index!r}") from exc

    if isinstance(response, dict):
        self_uri = response.get("selfUri") or response.get("self_uri")
        href = self_uri.get("href") if isinstance(self_uri, dict) else None
    else:
        self_uri = getattr(response, "self_uri", None)
        href = getattr(self_uri, "href", None)
    match = _SHAPE_HREF.search(href or "")
    if not match:
        raise ShapeResolutionError("Unable to determine shape index from response")
    return int(match.group(1))


class ShapeLinks:
    """Maps plan references to the identifiers the remote service assigned."""

    def __init__(self) -> None:
        self._indices: Dict[ShapeRef, int] = {}

    def bind(self, ref: ShapeRef, index: int) -> None:
        if ref in self._indices:
            raise ShapeResolutionError(f"Shape {ref.key} on slide {ref.slide_index} created twice")
        self._indices[ref] = index

    def resolve(self, ref: ShapeRef) -> int:
        try:
            return self._indices[ref]
        except KeyError:
            raise ShapeResolutionError(
                f"Shape {ref.key} on slide {ref.slide_index} used before it was created"
            ) from None

    def __contains__(self, ref: object) -> bool:
        return ref in self._indices

    def __len__(self) -> int:
        return len(self._indices)
