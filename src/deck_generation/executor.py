"""Sends a deck plan to the remote service, one operation at a time."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Type

from .linking import ShapeLinks
from .operations import (
    CopyMasterSlide,
    CreatePresentation,
    CreateShape,
    CreateSlide,
    DeckPlan,
    SetAnimation,
    SetSlideProperties,
    SetSlideTransition,
    UpdateShape,
    UpdateTextPortion,
)
from .slides_api import SlidesCloudService

logger = logging.getLogger(__name__)


class PlanExecutor:
    """Runs a ``DeckPlan`` strictly in order.

    Shape references are linked to the identifiers returned by each
    ``createShape`` call, so every update/animation waits on its creation.
    A failure aborts the run; whatever was already created stays remote.
    """

    def __init__(self, service: SlidesCloudService) -> None:
        self.service = service
        self._handlers: Dict[Type, Callable] = {
            CreatePresentation: self._create_presentation,
            SetSlideProperties: self._set_slide_properties,
            CopyMasterSlide: self._copy_master_slide,
            CreateSlide: self._create_slide,
            CreateShape: self._create_shape,
            UpdateShape: self._update_shape,
            UpdateTextPortion: self._update_text_portion,
            SetAnimation: self._set_animation,
            SetSlideTransition: self._set_slide_transition,
        }

    def execute(self, plan: DeckPlan) -> str:
        name = plan.presentation_name
        # Not atomic: two requests for the same name can interleave here.
        if self.service.object_exists(name):
            logger.info("Replacing existing presentation %s", name)
            self.service.delete_file(name)

        links = ShapeLinks()
        for op in plan:
            handler = self._handlers.get(type(op))
            if handler is None:
                raise TypeError(f"Unsupported plan operation: {type(op).__name__}")
            handler(name, op, links)

        logger.info("Built %s: %d operations, %d shapes", name, len(plan), len(links))
        return self.service.download_url(name)

    def _create_presentation(self, name: str, op: CreatePresentation, links: ShapeLinks) -> None:
        self.service.create_presentation(op.name)

    def _set_slide_properties(self, name: str, op: SetSlideProperties, links: ShapeLinks) -> None:
        self.service.set_slide_properties(name, op)

    def _copy_master_slide(self, name: str, op: CopyMasterSlide, links: ShapeLinks) -> None:
        self.service.copy_master_slide(name, op.source, op.source_slide_index, op.apply_to_all)

    def _create_slide(self, name: str, op: CreateSlide, links: ShapeLinks) -> None:
        self.service.create_slide(name)

    def _create_shape(self, name: str, op: CreateShape, links: ShapeLinks) -> None:
        index = self.service.create_shape(name, op.ref.slide_index, op.spec)
        links.bind(op.ref, index)

    def _update_shape(self, name: str, op: UpdateShape, links: ShapeLinks) -> None:
        self.service.update_shape(name, op.ref.slide_index, links.resolve(op.ref), op.anchoring, op.line)

    def _update_text_portion(self, name: str, op: UpdateTextPortion, links: ShapeLinks) -> None:
        self.service.update_text_portion(
            name,
            op.ref.slide_index,
            links.resolve(op.ref),
            op.paragraph_index,
            op.portion_index,
            op.text,
            op.style,
        )

    def _set_animation(self, name: str, op: SetAnimation, links: ShapeLinks) -> None:
        indices = [links.resolve(effect.shape) for effect in op.effects]
        logger.debug("Slide %d animation (%s): shapes %s", op.slide_index, op.strategy, indices)
        self.service.set_animation(name, op.slide_index, op.effects, indices)

    def _set_slide_transition(self, name: str, op: SetSlideTransition, links: ShapeLinks) -> None:
        self.service.set_slide_transition(name, op.slide_index, op.transition_type)
