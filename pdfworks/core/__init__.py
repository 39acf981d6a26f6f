"""Document contract, geometry, configuration and errors shared by pdfworks."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, EngineConfig, FontVariant
from .document import clone_document, load_document, page_size, serialize
from .exceptions import (
    AssemblyError,
    InvalidPageRangeError,
    PageNumberError,
    ParseError,
    PdfWorksError,
    ProtectionError,
    RotationError,
    UnsupportedImageType,
    WatermarkError,
)
from .geometry import PagePoint, PageSize, map_to_page_space, percent_to_pixels, pointer_to_percent
from .validator import is_valid_document

__all__ = [
    "DEFAULT_CONFIG",
    "EngineConfig",
    "FontVariant",
    "clone_document",
    "load_document",
    "page_size",
    "serialize",
    "PagePoint",
    "PageSize",
    "map_to_page_space",
    "percent_to_pixels",
    "pointer_to_percent",
    "is_valid_document",
    "PdfWorksError",
    "ParseError",
    "UnsupportedImageType",
    "RotationError",
    "PageNumberError",
    "WatermarkError",
    "ProtectionError",
    "AssemblyError",
    "InvalidPageRangeError",
]
