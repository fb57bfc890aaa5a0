from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    ASSET_MISSING = "asset_missing"
    SHAPE_RESOLUTION = "shape_resolution"
    REMOTE_OPERATION = "remote_operation"


class DeckError(Exception):
    """Base class for every failure raised while building or executing a deck."""

    kind: ErrorKind = ErrorKind.REMOTE_OPERATION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DeckError):
    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class AssetMissingError(DeckError):
    kind = ErrorKind.ASSET_MISSING

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Asset file not found: {path}")
        self.path = path


class ShapeResolutionError(DeckError):
    kind = ErrorKind.SHAPE_RESOLUTION


class RemoteOperationError(DeckError):
    kind = ErrorKind.REMOTE_OPERATION

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation


__all__ = [
    "AssetMissingError",
    "DeckError",
    "ErrorKind",
    "RemoteOperationError",
    "ShapeResolutionError",
    "ValidationError",
]
