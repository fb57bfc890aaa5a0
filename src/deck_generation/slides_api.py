from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from asposeslidescloud.apis.slides_api import SlidesApi
from asposeslidescloud.models import (
    Effect,
    LineFormat,
    MathParagraph,
    NoFill,
    OleObjectFrame,
    Paragraph,
    PictureFill,
    PictureFrame,
    Portion,
    Shape,
    Slide,
    SlideAnimation,
    SlideProperties,
    SlideShowTransition,
    SolidFill,
    TextFrameFormat,
)

from .config import ServiceConfig
from .errors import RemoteOperationError
from .linking import resolve_shape_index
from .models import AnimationEffect, LineSpec, ShapeKind, ShapeSpec, TextStyleSpec
from .operations import SetSlideProperties

logger = logging.getLogger(__name__)


def build_slides_api(config: ServiceConfig) -> SlidesApi:
    if not config.has_credentials:
        raise RuntimeError(
            "Aspose credentials not found. Set ASPOSE_CLIENT_ID and ASPOSE_CLIENT_SECRET."
        )
    return SlidesApi(None, config.client_id, config.client_secret)


# ---- DTO translation ----
def _fill_dto(color: Optional[str]):
    return SolidFill(color=color) if color else NoFill()


def _line_dto(line: LineSpec) -> LineFormat:
    return LineFormat(
        style=line.style,
        dash_style=line.dash_style,
        width=line.width,
        fill_format=SolidFill(color=line.color),
    )


def _picture_fill_dto(base64_data: str, mode: str = "Stretch") -> PictureFill:
    return PictureFill(base64_data=base64_data, picture_fill_mode=mode)


def shape_to_dto(spec: ShapeSpec):
    g = spec.geometry
    frame = {"x": g.x, "y": g.y, "width": g.width, "height": g.height}
    if spec.kind is ShapeKind.PICTURE_FRAME:
        if spec.picture is None:
            raise ValueError("picture frame without picture data")
        return PictureFrame(
            picture_fill_format=_picture_fill_dto(spec.picture.base64_data, spec.picture.fill_mode),
            **frame,
        )
    if spec.kind is ShapeKind.OLE_ICON_FRAME:
        if spec.icon is None:
            raise ValueError("icon frame without icon data")
        return OleObjectFrame(
            embedded_file_base64_data=spec.icon.embedded_base64,
            embedded_file_extension=spec.icon.embedded_extension,
            object_prog_id=spec.icon.prog_id,
            is_object_icon=True,
            substitute_picture_format=_picture_fill_dto(spec.icon.substitute_base64),
            substitute_picture_title=spec.icon.title,
            line_format=_line_dto(spec.line),
            **frame,
        )
    paragraphs = [Paragraph(alignment=spec.alignment)] if spec.alignment else None
    return Shape(
        shape_type=spec.kind.value,
        fill_format=_fill_dto(spec.fill_color),
        line_format=_line_dto(spec.line),
        text=spec.text,
        paragraphs=paragraphs,
        **frame,
    )


def text_frame_to_dto(anchoring: str, line: LineSpec) -> Shape:
    return Shape(
        text_frame_format=TextFrameFormat(anchoring_type=anchoring),
        line_format=_line_dto(line),
    )


def portion_to_dto(text: str, style: TextStyleSpec) -> Portion:
    portion = Portion(
        text=text,
        font_height=style.font_size,
        latin_font=style.font_family,
        font_color=style.font_color,
        font_bold="True" if style.bold else "False",
    )
    if style.justification:
        portion.math_paragraph = MathParagraph(justification=style.justification)
    return portion


def animation_to_dto(effects: Sequence[AnimationEffect], indices: Sequence[int]) -> SlideAnimation:
    return SlideAnimation(
        main_sequence=[
            Effect(
                type=effect.effect_type,
                subtype=effect.subtype,
                preset_class_type=effect.preset_class,
                shape_index=index,
                trigger_type=effect.trigger.value,
                accelerate=effect.acceleration,
                duration=effect.duration,
            )
            for effect, index in zip(effects, indices)
        ]
    )


class SlidesCloudService:
    """Capability set of the remote presentation service.

    One instance per process; every call names the presentation and works in
    the configured folder/storage. Request bodies are built inside the guarded
    call, so a DTO the SDK rejects surfaces as ``RemoteOperationError`` too.
    """

    def __init__(self, config: ServiceConfig, api: Optional[SlidesApi] = None) -> None:
        self.config = config
        self._api = api

    @property
    def api(self) -> SlidesApi:
        if self._api is None:
            self._api = build_slides_api(self.config)
        return self._api

    @property
    def folder(self) -> str:
        return self.config.folder

    def _storage_path(self, name: str) -> str:
        return f"{self.folder.rstrip('/')}/{name}" if self.folder else name

    def _location(self) -> dict:
        return {"folder": self.folder, "storage": self.config.storage}

    def _call(self, operation: str, request: Callable[[], Any]) -> Any:
        logger.debug("Remote call %s", operation)
        try:
            return request()
        except Exception as exc:
            raise RemoteOperationError(operation, str(exc)) from exc

    def object_exists(self, name: str) -> bool:
        result = self._call(
            "objectExists",
            lambda: self.api.object_exists(self._storage_path(name), storage_name=self.config.storage),
        )
        return bool(getattr(result, "exists", False))

    def delete_file(self, name: str) -> None:
        self._call(
            "deleteFile",
            lambda: self.api.delete_file(self._storage_path(name), storage_name=self.config.storage),
        )

    def create_presentation(self, name: str) -> None:
        self._call("createPresentation", lambda: self.api.create_presentation(name, **self._location()))

    def set_slide_properties(self, name: str, props: SetSlideProperties) -> None:
        def request():
            dto = SlideProperties(
                first_slide_number=props.first_slide_number,
                orientation=props.orientation,
                scale_type=props.scale_type,
                size_type=props.size_type,
                width=props.width,
                height=props.height,
            )
            return self.api.set_slide_properties(name, dto, **self._location())

        self._call("setSlideProperties", request)

    def copy_master_slide(self, name: str, source: str, source_slide_index: int, apply_to_all: bool) -> None:
        self._call(
            "copyMasterSlide",
            lambda: self.api.copy_master_slide(
                name, source, source_slide_index, apply_to_all=apply_to_all, **self._location()
            ),
        )

    def create_slide(self, name: str) -> None:
        self._call("createSlide", lambda: self.api.create_slide(name, **self._location()))

    def create_shape(self, name: str, slide_index: int, spec: ShapeSpec) -> int:
        response = self._call(
            "createShape",
            lambda: self.api.create_shape(name, slide_index, shape_to_dto(spec), **self._location()),
        )
        return resolve_shape_index(response)

    def update_shape(self, name: str, slide_index: int, shape_index: int, anchoring: str, line: LineSpec) -> None:
        self._call(
            "updateShape",
            lambda: self.api.update_shape(
                name, slide_index, shape_index, text_frame_to_dto(anchoring, line), **self._location()
            ),
        )

    def update_text_portion(
        self,
        name: str,
        slide_index: int,
        shape_index: int,
        paragraph_index: int,
        portion_index: int,
        text: str,
        style: TextStyleSpec,
    ) -> None:
        self._call(
            "updatePortion",
            lambda: self.api.update_portion(
                name,
                slide_index,
                shape_index,
                paragraph_index,
                portion_index,
                portion_to_dto(text, style),
                **self._location(),
            ),
        )

    def set_animation(
        self,
        name: str,
        slide_index: int,
        effects: Sequence[AnimationEffect],
        shape_indices: Sequence[int],
    ) -> None:
        self._call(
            "setAnimation",
            lambda: self.api.set_animation(
                name, slide_index, animation_to_dto(effects, shape_indices), **self._location()
            ),
        )

    def set_slide_transition(self, name: str, slide_index: int, transition_type: str) -> None:
        def request():
            dto = Slide(slide_show_transition=SlideShowTransition(type=transition_type))
            return self.api.update_slide(name, slide_index, dto, **self._location())

        self._call("updateSlide", request)

    def download_url(self, name: str) -> str:
        return f"{self.config.download_base}/slides/{name}/download"
