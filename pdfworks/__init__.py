"""PDF toolkit for embedding signatures and form fields, transforming pages and assembling documents."""

from __future__ import annotations

from . import assemble, core, fields, transform
from .assemble import (
    ImageSource,
    PageRange,
    fit_image,
    images_to_document,
    merge_documents,
    parse_page_ranges,
    split_document,
    split_ranges,
)
from .core import (
    DEFAULT_CONFIG,
    AssemblyError,
    EngineConfig,
    InvalidPageRangeError,
    PageNumberError,
    ParseError,
    PdfWorksError,
    ProtectionError,
    RotationError,
    UnsupportedImageType,
    WatermarkError,
    is_valid_document,
    map_to_page_space,
    percent_to_pixels,
    pointer_to_percent,
)
from .fields import (
    EmbedResult,
    FieldKind,
    FieldPlacement,
    PlacementStatus,
    SignerDetails,
    apply_field_placements,
    embed_fields,
)
from .transform import (
    PageNumberPosition,
    PageNumberSpec,
    WatermarkSpec,
    add_page_numbers,
    add_watermark,
    is_encrypted,
    protect_document,
    rotate_document,
    unprotect_document,
)

__version__ = "1.0.0"

__all__ = [
    "assemble",
    "core",
    "fields",
    "transform",
    "ImageSource",
    "PageRange",
    "fit_image",
    "images_to_document",
    "merge_documents",
    "parse_page_ranges",
    "split_document",
    "split_ranges",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "is_valid_document",
    "map_to_page_space",
    "percent_to_pixels",
    "pointer_to_percent",
    "EmbedResult",
    "FieldKind",
    "FieldPlacement",
    "PlacementStatus",
    "SignerDetails",
    "apply_field_placements",
    "embed_fields",
    "PageNumberPosition",
    "PageNumberSpec",
    "WatermarkSpec",
    "add_page_numbers",
    "add_watermark",
    "is_encrypted",
    "protect_document",
    "rotate_document",
    "unprotect_document",
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
