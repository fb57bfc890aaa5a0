from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .models import PRESENTATION_EXTENSION, DeckRequest
from .policies import DEFAULT_POLICY, LAYOUT_POLICIES

DEFAULT_SLIDE_COUNT = 2
DEFAULT_MAX_SLIDE_COUNT = 20


class DeckRequestForm(BaseModel):
    """Raw form fields as posted by the page; names follow the form inputs."""

    presentationName: str
    slideCount: Optional[int] = None
    layoutPolicy: Optional[str] = None

    @field_validator("presentationName", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        name = (value or "").strip() if isinstance(value, str) else value
        if not name:
            raise ValueError("Presentation name is required")
        if not isinstance(name, str):
            raise ValueError("Presentation name must be a string")
        if not name.endswith(PRESENTATION_EXTENSION) or name == PRESENTATION_EXTENSION:
            raise ValueError(f"Presentation name must end with {PRESENTATION_EXTENSION}")
        return name

    @field_validator("slideCount", mode="before")
    @classmethod
    def _blank_count(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
        return value

    @field_validator("slideCount")
    @classmethod
    def _check_count(cls, value: Optional[int], info: ValidationInfo) -> Optional[int]:
        if value is None:
            return value
        limit = (info.context or {}).get("max_slide_count", DEFAULT_MAX_SLIDE_COUNT)
        if value < 1:
            raise ValueError("Slide count must be a positive integer")
        if value > limit:
            raise ValueError(f"Slide count must not exceed {limit}")
        return value

    @field_validator("layoutPolicy", mode="before")
    @classmethod
    def _check_policy(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        policy = str(value).strip()
        if not policy:
            return None
        if policy not in LAYOUT_POLICIES:
            raise ValueError(
                f"Unknown layout policy '{policy}'. Available: {sorted(LAYOUT_POLICIES)}"
            )
        return policy


def _first_error(exc: PydanticValidationError) -> ValidationError:
    err = exc.errors()[0]
    loc = err.get("loc") or ("request",)
    field = str(loc[0])
    ctx_error = (err.get("ctx") or {}).get("error")
    if err.get("type") == "value_error" and ctx_error is not None:
        message = str(ctx_error)
    elif field == "slideCount":
        message = "Slide count must be a positive integer"
    else:
        message = err.get("msg", "Invalid value")
    return ValidationError(field, message)


def validate_deck_request(
    fields: Mapping[str, Any],
    image: Optional[bytes] = None,
    *,
    default_policy: str = DEFAULT_POLICY,
    max_slide_count: int = DEFAULT_MAX_SLIDE_COUNT,
) -> DeckRequest:
    """Validate raw request fields into a ``DeckRequest``.

    Raises ``ValidationError`` naming the offending form field. A missing
    slide count falls back to ``DEFAULT_SLIDE_COUNT``.
    """

    data = {key: fields.get(key) for key in ("presentationName", "slideCount", "layoutPolicy")}
    try:
        form = DeckRequestForm.model_validate(data, context={"max_slide_count": max_slide_count})
    except PydanticValidationError as exc:
        raise _first_error(exc) from exc

    policy = form.layoutPolicy or default_policy
    if policy not in LAYOUT_POLICIES:
        raise ValidationError(
            "layoutPolicy", f"Unknown layout policy '{policy}'. Available: {sorted(LAYOUT_POLICIES)}"
        )

    return DeckRequest(
        presentation_name=form.presentationName,
        slide_count=form.slideCount if form.slideCount is not None else DEFAULT_SLIDE_COUNT,
        layout_policy=policy,
        uploaded_image=image or None,
    )
