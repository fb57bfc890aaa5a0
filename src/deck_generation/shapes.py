from __future__ import annotations

from typing import Dict, List

from .layouts import EMPTY_PNG_BASE64, FrameTemplate, ShapeTemplate, TextBoxTemplate
from .models import (
    TRANSPARENT,
    Geometry,
    IconSpec,
    LineSpec,
    PictureSpec,
    ShapeKind,
    ShapeRef,
    ShapeSpec,
    TextStyleSpec,
)
from .operations import CreateShape, Operation, UpdateShape, UpdateTextPortion
from .units import inch_to_pt


def to_geometry(x: float, y: float, width: float, height: float) -> Geometry:
    return Geometry(x=inch_to_pt(x), y=inch_to_pt(y), width=inch_to_pt(width), height=inch_to_pt(height))


class SlideBuilder:
    """Collects the operations for one slide.

    Every ``add_*`` call emits the creation operation first and returns a
    ``ShapeRef``; operations that touch the shape afterwards carry that
    reference and are linked to the remote identifier during execution.
    """

    def __init__(self, slide_index: int) -> None:
        if slide_index < 1:
            raise ValueError("slide_index is 1-based")
        self.slide_index = slide_index
        self.operations: List[Operation] = []
        self._counters: Dict[str, int] = {}

    def _next_ref(self, prefix: str) -> ShapeRef:
        seq = self._counters.get(prefix, 0)
        self._counters[prefix] = seq + 1
        return ShapeRef(slide_index=self.slide_index, key=f"{prefix}.{seq}")

    def _create(self, prefix: str, spec: ShapeSpec) -> ShapeRef:
        ref = self._next_ref(prefix)
        self.operations.append(CreateShape(ref=ref, spec=spec))
        return ref

    def add_shape(self, template: ShapeTemplate, prefix: str = "shape") -> ShapeRef:
        spec = ShapeSpec(
            slide_index=self.slide_index,
            kind=template.kind,
            geometry=to_geometry(template.x, template.y, template.width, template.height),
            fill_color=template.color,
            line=LineSpec(
                color=template.line_color or template.color or TRANSPARENT,
                width=0,
                style=template.line_style,
            ),
        )
        return self._create(prefix, spec)

    def add_text_box(self, template: TextBoxTemplate, prefix: str = "text") -> ShapeRef:
        ref = self._create(
            prefix,
            ShapeSpec(
                slide_index=self.slide_index,
                kind=ShapeKind.RECTANGLE,
                geometry=to_geometry(template.x, template.y, template.width, template.height),
                fill_color=None,
                line=LineSpec(),
                text=template.text,
                alignment=template.alignment,
            ),
        )
        self.operations.append(UpdateShape(ref=ref, anchoring=template.anchoring.value, line=LineSpec()))
        self.operations.append(
            UpdateTextPortion(
                ref=ref,
                text=template.text,
                style=TextStyleSpec(
                    font_size=template.font_size,
                    bold=template.bold,
                    justification=template.justification,
                    anchoring=template.anchoring,
                ),
            )
        )
        return ref

    def add_picture(self, frame: FrameTemplate, base64_data: str, prefix: str = "picture") -> ShapeRef:
        spec = ShapeSpec(
            slide_index=self.slide_index,
            kind=ShapeKind.PICTURE_FRAME,
            geometry=to_geometry(frame.x, frame.y, frame.width, frame.height),
            picture=PictureSpec(base64_data=base64_data),
        )
        return self._create(prefix, spec)

    def add_icon(self, frame: FrameTemplate, icon_base64: str, prefix: str = "icon") -> ShapeRef:
        spec = ShapeSpec(
            slide_index=self.slide_index,
            kind=ShapeKind.OLE_ICON_FRAME,
            geometry=to_geometry(frame.x, frame.y, frame.width, frame.height),
            line=LineSpec(dash_style="Solid"),
            icon=IconSpec(substitute_base64=icon_base64, embedded_base64=EMPTY_PNG_BASE64),
        )
        return self._create(prefix, spec)
