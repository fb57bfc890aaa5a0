"""Plan (and optionally build) a deck from the command line.

Usage:
  python scripts/build_deck.py Deck.pptx --dry-run
  python scripts/build_deck.py Deck.pptx --slides 4 --policy user-count --image cover.png

Auth:
- Requires ASPOSE_CLIENT_ID / ASPOSE_CLIENT_SECRET (env or .env) unless --dry-run.
"""
from __future__ import annotations

import argparse
import json
import sys
from collections import Counter
from dataclasses import asdict
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.deck_generation.assets import AssetProvider
from src.deck_generation.config import ServiceConfig
from src.deck_generation.errors import DeckError
from src.deck_generation.planner_service import build_deck_plan
from src.deck_generation.policies import LAYOUT_POLICIES
from src.deck_generation.validator import validate_deck_request


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description="Plan a presentation and send it to the slides service.")
    parser.add_argument("name", help="Presentation file name (must end with .pptx)")
    parser.add_argument("--slides", default=None, help="Slide count (user-count layout)")
    parser.add_argument("--policy", choices=sorted(LAYOUT_POLICIES), default=None, help="Layout policy")
    parser.add_argument("--image", type=Path, default=None, help="Optional image for the title slide")
    parser.add_argument("--dry-run", action="store_true", help="Print the plan instead of executing it")
    args = parser.parse_args(argv)

    config = ServiceConfig.from_env()
    fields = {"presentationName": args.name, "slideCount": args.slides, "layoutPolicy": args.policy}
    try:
        image = args.image.read_bytes() if args.image else None
        request = validate_deck_request(
            fields,
            image,
            default_policy=config.default_policy,
            max_slide_count=config.max_slide_count,
        )
        plan = build_deck_plan(request, AssetProvider(config).build_assets(request.uploaded_image))
    except DeckError as e:
        print(f"[{e.kind.value}] {e.message}")
        return 2

    counts = Counter(type(op).__name__ for op in plan)
    print(f"Plan for {plan.presentation_name}: {len(plan)} operations")
    for op_name, count in sorted(counts.items()):
        print(f"  {op_name:<20} {count}")

    if args.dry_run:
        ops = [{"op": type(op).__name__, **asdict(op)} for op in plan]
        print(json.dumps(ops, indent=2, default=str)[:4000])
        return 0

    from src.deck_generation.executor import PlanExecutor
    from src.deck_generation.slides_api import SlidesCloudService

    try:
        url = PlanExecutor(SlidesCloudService(config)).execute(plan)
    except DeckError as e:
        print(f"Build failed [{e.kind.value}]:", e.message)
        return 3
    print("Download:", url)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
