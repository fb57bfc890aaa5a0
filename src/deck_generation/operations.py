"""Operations that make up a deck plan, in the order the remote service receives them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Type, TypeVar, Union

from .models import AnimationEffect, LineSpec, ShapeRef, ShapeSpec, TextStyleSpec


@dataclass(frozen=True)
class CreatePresentation:
    name: str


@dataclass(frozen=True)
class SetSlideProperties:
    first_slide_number: int = 1
    orientation: str = "Landscape"
    scale_type: str = "DoNotScale"
    size_type: str = "Widescreen"
    width: float = 960
    height: float = 720


@dataclass(frozen=True)
class CopyMasterSlide:
    source: str
    source_slide_index: int = 1
    apply_to_all: bool = True


@dataclass(frozen=True)
class CreateSlide:
    slide_index: int


@dataclass(frozen=True)
class CreateShape:
    ref: ShapeRef
    spec: ShapeSpec


@dataclass(frozen=True)
class UpdateShape:
    ref: ShapeRef
    anchoring: str
    line: LineSpec = field(default_factory=LineSpec)


@dataclass(frozen=True)
class UpdateTextPortion:
    ref: ShapeRef
    text: str
    style: TextStyleSpec
    paragraph_index: int = 1
    portion_index: int = 1


@dataclass(frozen=True)
class SetAnimation:
    slide_index: int
    effects: Tuple[AnimationEffect, ...]
    strategy: Optional[str] = None


@dataclass(frozen=True)
class SetSlideTransition:
    slide_index: int
    transition_type: str = "Fade"


Operation = Union[
    CreatePresentation,
    SetSlideProperties,
    CopyMasterSlide,
    CreateSlide,
    CreateShape,
    UpdateShape,
    UpdateTextPortion,
    SetAnimation,
    SetSlideTransition,
]

OpT = TypeVar("OpT")


@dataclass(frozen=True)
class DeckPlan:
    presentation_name: str
    operations: Tuple[Operation, ...]

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self):
        return iter(self.operations)

    def operations_of(self, op_type: Type[OpT]) -> List[OpT]:
        return [op for op in self.operations if isinstance(op, op_type)]

    def shapes_on(self, slide_index: int) -> List[CreateShape]:
        return [op for op in self.operations_of(CreateShape) if op.ref.slide_index == slide_index]

    def animation_for(self, slide_index: int) -> Optional[SetAnimation]:
        for op in self.operations_of(SetAnimation):
            if op.slide_index == slide_index:
                return op
        return None


__all__ = [
    "CopyMasterSlide",
    "CreatePresentation",
    "CreateShape",
    "CreateSlide",
    "DeckPlan",
    "Operation",
    "SetAnimation",
    "SetSlideProperties",
    "SetSlideTransition",
    "UpdateShape",
    "UpdateTextPortion",
]
