from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from .assets import AssetProvider
from .config import ServiceConfig
from .errors import AssetMissingError, DeckError
from .executor import PlanExecutor
from .models import DeckOutcome
from .planner_service import build_deck_plan
from .slides_api import SlidesCloudService
from .validator import validate_deck_request

logger = logging.getLogger(__name__)


def _discard_upload(image_path: Optional[Path]) -> None:
    if not image_path:
        return
    try:
        image_path.unlink(missing_ok=True)
    except OSError:
        logger.debug("Failed to remove upload %s", image_path)


def _read_upload(image_path: Optional[Path]) -> Optional[bytes]:
    if not image_path:
        return None
    try:
        return image_path.read_bytes()
    except OSError as exc:
        raise AssetMissingError(str(image_path), f"Uploaded image unreadable: {exc}") from exc


def run_deck_pipeline(
    fields: Mapping[str, Any],
    image_path: Optional[Path],
    *,
    config: ServiceConfig,
    service: SlidesCloudService,
    assets: Optional[AssetProvider] = None,
) -> DeckOutcome:
    """Validate, plan and execute one deck request.

    Domain failures come back as a failed ``DeckOutcome``. The uploaded image
    is removed once the whole plan ran, or straight away when the request
    fails before anything reached the remote service. If execution itself
    fails the image stays on disk.
    """

    executing = False
    try:
        request = validate_deck_request(
            fields,
            _read_upload(image_path),
            default_policy=config.default_policy,
            max_slide_count=config.max_slide_count,
        )
        deck_assets = (assets or AssetProvider(config)).build_assets(request.uploaded_image)
        plan = build_deck_plan(request, deck_assets)
        logger.info(
            "Executing plan for %s (%s, %d operations)",
            request.presentation_name,
            request.layout_policy,
            len(plan),
        )
        executing = True
        download_url = PlanExecutor(service).execute(plan)
    except DeckError as exc:
        logger.warning("Deck build failed [%s]: %s", exc.kind.value, exc.message)
        if executing and image_path:
            logger.info("Keeping uploaded image %s after failed build", image_path)
        else:
            _discard_upload(image_path)
        return DeckOutcome.failure(exc.kind.value, exc.message, field=getattr(exc, "field", None))

    _discard_upload(image_path)
    return DeckOutcome.success(download_url)
