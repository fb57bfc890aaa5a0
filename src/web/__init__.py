"""Web front for the deck builder."""

from __future__ import annotations

from importlib import import_module
from typing import Any


def get_blueprint() -> Any:
    """Import lazily so the SDK is only loaded when the Flask app boots."""
    routes = import_module("src.web.routes")
    return routes.deck_bp


__all__ = ["get_blueprint"]
