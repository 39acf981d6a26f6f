"""Stamp running page numbers onto every page."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from reportlab.pdfbase.pdfmetrics import stringWidth

from ..core.config import DEFAULT_CONFIG, EngineConfig, FontVariant
from ..core.document import clone_document, load_document, page_size, serialize
from ..core.exceptions import PageNumberError
from ..core.geometry import PagePoint, PageSize
from ..core.overlay import PageOverlay
from ..core.utils import Source, get_logger

LOGGER = get_logger("pdfworks.transform.numbering")


class PageNumberPosition(str, Enum):
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"


@dataclass(frozen=True)
class PageNumberSpec:
    position: PageNumberPosition = PageNumberPosition.BOTTOM_CENTER
    font_size: float = 12
    start_page: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", PageNumberPosition(self.position))
        if self.font_size <= 0:
            raise ValueError("Page number font size must be positive")


def number_anchor(
    size: PageSize,
    text_width: float,
    position: PageNumberPosition,
    margin: float,
) -> PagePoint:
    """Return the baseline origin of a page number of ``text_width`` points."""

    horizontal = position.value.split("-")[1]
    if horizontal == "center":
        x = size.width / 2 - text_width / 2
    elif horizontal == "right":
        x = size.width - text_width - margin
    else:
        x = margin
    y = size.height - margin if position.value.startswith("top") else margin
    return PagePoint(x, y)


def add_page_numbers(
    source: Source,
    spec: PageNumberSpec | None = None,
    *,
    config: EngineConfig | None = None,
) -> bytes:
    """Return ``source`` with ``spec.start_page + index`` drawn on each page.

    Raises:
        ParseError: If ``source`` is not a loadable PDF document.
        PageNumberError: If the numbers cannot be drawn or the document
            cannot be rewritten.
    """

    spec = spec or PageNumberSpec()
    config = config or DEFAULT_CONFIG
    reader = load_document(source)
    writer = clone_document(reader)
    font = config.font_for(FontVariant.REGULAR)

    try:
        for index, page in enumerate(writer.pages):
            label = str(spec.start_page + index)
            size = page_size(page)
            text_width = stringWidth(label, font, spec.font_size)
            x, y = number_anchor(size, text_width, spec.position, config.page_number_margin)
            LOGGER.debug("Numbering page %d as %s at x=%.2f, y=%.2f", index + 1, label, x, y)

            overlay = PageOverlay(size)
            overlay.canvas.setFont(font, spec.font_size)
            overlay.canvas.setFillColorRGB(0, 0, 0)
            overlay.canvas.drawString(x, y, label)
            overlay.apply(page)
        data = serialize(writer)
    except Exception as exc:  # reportlab and pypdf errors vary
        raise PageNumberError(f"Failed to add page numbers: {exc}") from exc

    LOGGER.info("Numbered %d page(s) starting at %d", len(writer.pages), spec.start_page)
    return data


__all__ = ["PageNumberPosition", "PageNumberSpec", "add_page_numbers", "number_anchor"]
