"""
Type definitions for field placements and their embedding outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, List, Mapping, Optional, Union

from ..core.config import FontVariant


class FieldKind(str, Enum):
    SIGNATURE = "signature"
    INITIALS = "initials"
    NAME = "name"
    DATE = "date"
    TEXT = "text"
    COMPANY_STAMP = "company_stamp"

    @classmethod
    def parse(cls, value: Union["FieldKind", str, None]) -> Optional["FieldKind"]:
        """Return the matching kind, or ``None`` for missing or unknown tags."""

        if value is None or isinstance(value, FieldKind):
            return value
        normalised = value.strip().lower().replace("-", "_")
        try:
            return cls(normalised)
        except ValueError:
            return None


@dataclass(frozen=True)
class FieldStyle:
    """Default box size and typography for one field kind."""

    width: float
    height: float
    font: FontVariant
    font_size: float


FIELD_STYLES: dict[FieldKind, FieldStyle] = {
    FieldKind.SIGNATURE: FieldStyle(200, 80, FontVariant.BOLD_OBLIQUE, 18),
    FieldKind.INITIALS: FieldStyle(100, 50, FontVariant.BOLD, 16),
    FieldKind.NAME: FieldStyle(180, 50, FontVariant.REGULAR, 12),
    FieldKind.DATE: FieldStyle(120, 50, FontVariant.REGULAR, 10),
    FieldKind.TEXT: FieldStyle(150, 50, FontVariant.REGULAR, 10),
    FieldKind.COMPANY_STAMP: FieldStyle(150, 80, FontVariant.BOLD, 8),
}

DEFAULT_STYLE = FieldStyle(200, 80, FontVariant.REGULAR, 14)


def style_for(kind: Optional[FieldKind]) -> FieldStyle:
    if kind is None:
        return DEFAULT_STYLE
    return FIELD_STYLES[kind]


@dataclass
class FieldPlacement:
    """
    One piece of content to embed on a page.

    Attributes:
        page_number: 1-based page number
        x: Horizontal position, percent of page width from the left edge
        y: Vertical position, percent of page height from the top edge
        value: Data URI with base64 PNG/JPEG data, or plain text
        kind: Field kind tag; unknown tags are kept as strings
        width: Box width in points, defaults by kind
        height: Box height in points, defaults by kind
    """

    page_number: int
    x: float
    y: float
    value: str = ""
    kind: Union[FieldKind, str, None] = None
    width: Optional[float] = None
    height: Optional[float] = None

    def __post_init__(self) -> None:
        parsed = FieldKind.parse(self.kind)
        if parsed is not None:
            self.kind = parsed

    @property
    def field_kind(self) -> Optional[FieldKind]:
        return self.kind if isinstance(self.kind, FieldKind) else None

    @property
    def style(self) -> FieldStyle:
        return style_for(self.field_kind)

    @property
    def box(self) -> tuple[float, float]:
        style = self.style
        return (self.width or style.width, self.height or style.height)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FieldPlacement":
        """Build a placement from editor payloads (camelCase or snake_case keys)."""

        def pick(*keys: str) -> Any:
            for key in keys:
                if key in data and data[key] is not None:
                    return data[key]
            return None

        page_number = pick("page_number", "pageNumber", "page")
        if page_number is None:
            raise ValueError("Field placement requires a page number")
        width = pick("width")
        height = pick("height")
        return cls(
            page_number=int(page_number),
            x=float(pick("x") or 0),
            y=float(pick("y") or 0),
            value=str(pick("value", "signature_data", "signatureData") or ""),
            kind=pick("kind", "field_type", "fieldType"),
            width=float(width) if width else None,
            height=float(height) if height else None,
        )


@dataclass(frozen=True)
class SignerDetails:
    """Details collected from the signer, used to fill empty field values."""

    full_name: str = ""
    initials: str = ""
    signature_data: Optional[str] = None
    company_stamp: Optional[str] = None

    def value_for(self, kind: Optional[FieldKind], *, today: Optional[date] = None) -> str:
        if kind is FieldKind.SIGNATURE:
            return self.signature_data or self.full_name
        if kind is FieldKind.INITIALS:
            return self.initials
        if kind is FieldKind.NAME:
            return self.full_name
        if kind is FieldKind.DATE:
            return (today or date.today()).isoformat()
        if kind is FieldKind.TEXT:
            return "Custom Text"
        if kind is FieldKind.COMPANY_STAMP:
            return self.company_stamp or ""
        return ""


class PlacementStatus(str, Enum):
    EMBEDDED = "embedded"
    FALLBACK = "fallback"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class PlacementOutcome:
    """Result of embedding one placement."""

    index: int
    placement: FieldPlacement
    status: PlacementStatus
    detail: Optional[str] = None

    def __str__(self) -> str:
        suffix = f", detail='{self.detail}'" if self.detail else ""
        return f"PlacementOutcome(index={self.index}, status={self.status.value}{suffix})"


@dataclass
class EmbedResult:
    """Output bytes of a signing batch together with per-placement outcomes."""

    data: bytes
    outcomes: List[PlacementOutcome] = field(default_factory=list)

    def with_status(self, status: PlacementStatus) -> List[PlacementOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status is status]

    @property
    def embedded(self) -> List[PlacementOutcome]:
        return self.with_status(PlacementStatus.EMBEDDED)

    @property
    def fallbacks(self) -> List[PlacementOutcome]:
        return self.with_status(PlacementStatus.FALLBACK)

    @property
    def skipped(self) -> List[PlacementOutcome]:
        return self.with_status(PlacementStatus.SKIPPED)

    @property
    def failed(self) -> List[PlacementOutcome]:
        return self.with_status(PlacementStatus.FAILED)


__all__ = [
    "FieldKind",
    "FieldStyle",
    "FIELD_STYLES",
    "DEFAULT_STYLE",
    "style_for",
    "FieldPlacement",
    "SignerDetails",
    "PlacementStatus",
    "PlacementOutcome",
    "EmbedResult",
]
