"""Signature and form-field embedding."""

from __future__ import annotations

from .embedder import ContentEmbedder, decode_image_data, is_image_data
from .mutator import apply_field_placements, embed_fields
from .types import (
    DEFAULT_STYLE,
    FIELD_STYLES,
    EmbedResult,
    FieldKind,
    FieldPlacement,
    FieldStyle,
    PlacementOutcome,
    PlacementStatus,
    SignerDetails,
    style_for,
)

__all__ = [
    "ContentEmbedder",
    "decode_image_data",
    "is_image_data",
    "apply_field_placements",
    "embed_fields",
    "DEFAULT_STYLE",
    "FIELD_STYLES",
    "EmbedResult",
    "FieldKind",
    "FieldPlacement",
    "FieldStyle",
    "PlacementOutcome",
    "PlacementStatus",
    "SignerDetails",
    "style_for",
]
