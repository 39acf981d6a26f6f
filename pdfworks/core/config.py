"""Engine configuration passed explicitly into pdfworks operations."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping

from reportlab.lib.pagesizes import A4, LETTER

PAGE_SIZES: dict[str, tuple[float, float]] = {
    "A4": A4,
    "LETTER": LETTER,
}


class FontVariant(str, Enum):
    REGULAR = "regular"
    BOLD = "bold"
    BOLD_OBLIQUE = "bold-oblique"


def _default_fonts() -> dict[FontVariant, str]:
    return {
        FontVariant.REGULAR: "Helvetica",
        FontVariant.BOLD: "Helvetica-Bold",
        FontVariant.BOLD_OBLIQUE: "Helvetica-BoldOblique",
    }


@dataclass(frozen=True)
class EngineConfig:
    """Tunable constants shared by the embedder, transformer and assembler.

    Attributes:
        page_size: Page size used when synthesising pages from images.
        image_margin: Margin in points kept around images on synthesised pages.
        page_number_margin: Distance in points between page numbers and the
            page edges.
        text_padding: Horizontal padding applied to embedded text fields.
        owner_password_suffix: Appended to the user password to derive the
            owner password when protecting documents.
        fonts: Standard font name used for each :class:`FontVariant`.
        fallback_font: Font used when a field's own font cannot be used.
        fallback_font_size: Size of the fallback text.
        fallback_text: Text drawn when a field cannot be drawn as requested.
        image_placeholder: Text drawn in place of undecodable image data.
    """

    page_size: tuple[float, float] = A4
    image_margin: float = 20.0
    page_number_margin: float = 30.0
    text_padding: float = 5.0
    owner_password_suffix: str = "_owner"
    fonts: Mapping[FontVariant, str] = field(default_factory=_default_fonts)
    fallback_font: str = "Helvetica"
    fallback_font_size: float = 12.0
    fallback_text: str = "[SIGNED]"
    image_placeholder: str = "[IMAGE]"

    def font_for(self, variant: FontVariant) -> str:
        return self.fonts.get(variant, self.fallback_font)

    def with_updates(self, **changes: object) -> "EngineConfig":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EngineConfig":
        """Build a configuration from ``PDFWORKS_*`` environment variables."""

        env = os.environ if environ is None else environ
        changes: dict[str, object] = {}

        page_size = env.get("PDFWORKS_PAGE_SIZE")
        if page_size:
            try:
                changes["page_size"] = PAGE_SIZES[page_size.strip().upper()]
            except KeyError as exc:
                raise ValueError(
                    f"PDFWORKS_PAGE_SIZE must be one of {sorted(PAGE_SIZES)}, got {page_size!r}"
                ) from exc

        margin = env.get("PDFWORKS_IMAGE_MARGIN")
        if margin:
            try:
                value = float(margin)
            except ValueError as exc:
                raise ValueError(f"PDFWORKS_IMAGE_MARGIN must be a number, got {margin!r}") from exc
            if value < 0:
                raise ValueError("PDFWORKS_IMAGE_MARGIN must not be negative")
            changes["image_margin"] = value

        suffix = env.get("PDFWORKS_OWNER_SUFFIX")
        if suffix:
            changes["owner_password_suffix"] = suffix

        return cls(**changes)


DEFAULT_CONFIG = EngineConfig()

__all__ = ["EngineConfig", "FontVariant", "DEFAULT_CONFIG", "PAGE_SIZES"]
