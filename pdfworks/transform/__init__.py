"""Whole-document page transformations: rotation, numbering, watermarks and passwords."""

from __future__ import annotations

from .numbering import PageNumberPosition, PageNumberSpec, add_page_numbers
from .rotate import VALID_ANGLES, rotate_document
from .security import (
    PROTECTED_PERMISSIONS,
    ProtectionSpec,
    is_encrypted,
    protect_document,
    unprotect_document,
)
from .watermark import WatermarkSpec, add_watermark

__all__ = [
    "PageNumberPosition",
    "PageNumberSpec",
    "add_page_numbers",
    "VALID_ANGLES",
    "rotate_document",
    "PROTECTED_PERMISSIONS",
    "ProtectionSpec",
    "is_encrypted",
    "protect_document",
    "unprotect_document",
    "WatermarkSpec",
    "add_watermark",
]
