"""Overlay a centered, rotated, translucent text watermark on every page."""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.pdfbase.pdfmetrics import getAscentDescent, stringWidth

from ..core.config import DEFAULT_CONFIG, EngineConfig, FontVariant
from ..core.document import clone_document, load_document, page_size, serialize
from ..core.exceptions import WatermarkError
from ..core.overlay import PageOverlay
from ..core.utils import Source, get_logger

LOGGER = get_logger("pdfworks.transform.watermark")


@dataclass(frozen=True)
class WatermarkSpec:
    """Watermark appearance; ``color`` channels and ``opacity`` range 0-1."""

    text: str
    opacity: float = 0.3
    font_size: float = 50
    rotation: float = -45
    color: tuple[float, float, float] = (0.7, 0.7, 0.7)

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Watermark text must not be empty")
        if not 0 <= self.opacity <= 1:
            raise ValueError("Watermark opacity must be between 0 and 1")
        if self.font_size <= 0:
            raise ValueError("Watermark font size must be positive")
        if len(self.color) != 3 or any(not 0 <= channel <= 1 for channel in self.color):
            raise ValueError("Watermark color must be three channels between 0 and 1")


def add_watermark(
    source: Source,
    spec: WatermarkSpec,
    *,
    config: EngineConfig | None = None,
) -> bytes:
    """Return ``source`` with ``spec.text`` drawn once at the center of each page.

    Existing content, including earlier watermarks, is kept; applying the
    watermark twice draws the text twice.

    Raises:
        ParseError: If ``source`` is not a loadable PDF document.
        WatermarkError: If the text cannot be drawn or the document cannot be
            rewritten.
    """

    config = config or DEFAULT_CONFIG
    reader = load_document(source)
    writer = clone_document(reader)
    font = config.font_for(FontVariant.BOLD)

    try:
        text_width = stringWidth(spec.text, font, spec.font_size)
        ascent, descent = getAscentDescent(font, spec.font_size)
        text_height = ascent - descent
        for index, page in enumerate(writer.pages):
            size = page_size(page)
            x = (size.width - text_width) / 2
            y = (size.height - text_height) / 2
            LOGGER.debug("Watermarking page %d at x=%.2f, y=%.2f", index + 1, x, y)

            overlay = PageOverlay(size)
            canvas = overlay.canvas
            canvas.saveState()
            canvas.setFont(font, spec.font_size)
            canvas.setFillColorRGB(*spec.color, alpha=spec.opacity)
            canvas.translate(x, y)
            canvas.rotate(spec.rotation)
            canvas.drawString(0, 0, spec.text)
            canvas.restoreState()
            overlay.apply(page)
        data = serialize(writer)
    except Exception as exc:  # reportlab and pypdf errors vary
        raise WatermarkError(f"Failed to add watermark: {exc}") from exc

    LOGGER.info("Watermarked %d page(s)", len(writer.pages))
    return data


__all__ = ["WatermarkSpec", "add_watermark"]
