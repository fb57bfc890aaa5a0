from .errors import (
    AssetMissingError,
    DeckError,
    ErrorKind,
    RemoteOperationError,
    ShapeResolutionError,
    ValidationError,
)
from .models import (
    AnimationEffect,
    DeckAssets,
    DeckOutcome,
    DeckRequest,
    ShapeKind,
    ShapeRef,
    ShapeSpec,
    TextStyleSpec,
    Trigger,
)
from .operations import DeckPlan
from .units import inch_to_pt
from .validator import validate_deck_request
from .animations import ANIMATION_STRATEGIES, bounce_cascade, fly_entrance
from .policies import LAYOUT_POLICIES, FixedTemplatePolicy, LayoutPolicy, UserCountPolicy, get_policy
from .planner_service import build_deck_plan

__all__ = [
    "ANIMATION_STRATEGIES",
    "AnimationEffect",
    "AssetMissingError",
    "DeckAssets",
    "DeckError",
    "DeckOutcome",
    "DeckPlan",
    "DeckRequest",
    "ErrorKind",
    "FixedTemplatePolicy",
    "LAYOUT_POLICIES",
    "LayoutPolicy",
    "RemoteOperationError",
    "ShapeKind",
    "ShapeRef",
    "ShapeResolutionError",
    "ShapeSpec",
    "TextStyleSpec",
    "Trigger",
    "UserCountPolicy",
    "ValidationError",
    "bounce_cascade",
    "build_deck_plan",
    "fly_entrance",
    "get_policy",
    "inch_to_pt",
    "validate_deck_request",
]
