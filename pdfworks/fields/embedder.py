"""Draw field placements (images or styled text) onto page overlays."""

from __future__ import annotations

import base64
import io

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from ..core.config import DEFAULT_CONFIG, EngineConfig
from ..core.geometry import PagePoint, PageSize, map_to_page_space
from ..core.utils import get_logger
from .types import FieldPlacement, FieldStyle, PlacementOutcome, PlacementStatus

LOGGER = get_logger("pdfworks.fields.embedder")

IMAGE_PREFIX = "data:image"


def is_image_data(value: str) -> bool:
    return value.startswith(IMAGE_PREFIX)


def decode_image_data(value: str) -> Image.Image:
    """Decode a ``data:image/...;base64,`` URI into a loaded Pillow image.

    The declared mime type selects the expected format: ``image/png`` means
    PNG, anything else JPEG. Decoded data of another format is rejected.
    """

    header, _, payload = value.partition(",")
    if not payload:
        raise ValueError("Image data URI has no payload")
    image_bytes = base64.b64decode(payload)
    expected = "PNG" if "image/png" in header else "JPEG"
    image = Image.open(io.BytesIO(image_bytes))
    image.load()
    if image.format != expected:
        raise ValueError(f"Image data declared as {expected} but decoded as {image.format}")
    return image


class ContentEmbedder:
    """Embed placements on a page overlay canvas.

    :meth:`embed` never raises: images that cannot be embedded fall back to a
    text placeholder, text that cannot be drawn falls back to the configured
    fallback font, and only when that also fails is the placement reported
    as failed.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def embed(
        self,
        canvas: Canvas,
        size: PageSize,
        placement: FieldPlacement,
        *,
        index: int = 0,
    ) -> PlacementOutcome:
        box_width, box_height = placement.box
        origin = map_to_page_space(size, placement.x, placement.y, box_width, box_height)
        style = placement.style
        value = placement.value or ""
        detail: str | None = None

        if is_image_data(value):
            try:
                self._draw_image(canvas, size, origin, (box_width, box_height), value)
            except Exception as exc:  # decoder and drawing errors vary
                LOGGER.warning(
                    "Placement %d on page %d: image could not be embedded (%s); drawing placeholder",
                    index,
                    placement.page_number,
                    exc,
                )
                detail = f"image could not be embedded: {exc}"
            else:
                LOGGER.debug(
                    "Image embedded on page %d at x=%.2f, y=%.2f", placement.page_number, *origin
                )
                return PlacementOutcome(index, placement, PlacementStatus.EMBEDDED)

        text = self.clean_text(value)
        try:
            self._draw_text(canvas, origin, text, style)
        except Exception as exc:  # font lookup errors vary
            LOGGER.warning(
                "Placement %d on page %d: text could not be drawn (%s); using fallback font",
                index,
                placement.page_number,
                exc,
            )
            try:
                self._draw_fallback(canvas, origin)
            except Exception as fallback_exc:  # fatal for this placement only
                LOGGER.error(
                    "Placement %d on page %d could not be embedded: %s",
                    index,
                    placement.page_number,
                    fallback_exc,
                )
                return PlacementOutcome(index, placement, PlacementStatus.FAILED, str(fallback_exc))
            return PlacementOutcome(
                index, placement, PlacementStatus.FALLBACK, f"text could not be drawn: {exc}"
            )

        LOGGER.debug(
            "Text field (%s) embedded on page %d at x=%.2f, y=%.2f",
            placement.kind,
            placement.page_number,
            *origin,
        )
        status = PlacementStatus.FALLBACK if detail else PlacementStatus.EMBEDDED
        return PlacementOutcome(index, placement, status, detail)

    def clean_text(self, value: str) -> str:
        if value.startswith("data:"):
            return self.config.image_placeholder
        return value or self.config.fallback_text

    def _draw_image(
        self,
        canvas: Canvas,
        size: PageSize,
        origin: PagePoint,
        box: tuple[float, float],
        value: str,
    ) -> None:
        image = decode_image_data(value)
        x, y = origin
        width = min(box[0], size.width - x)
        height = min(box[1], size.height - y)
        if width <= 0 or height <= 0:
            raise ValueError("Image box lies outside the page")
        canvas.drawImage(
            ImageReader(image),
            max(0.0, x),
            max(0.0, y),
            width=width,
            height=height,
            mask="auto",
        )

    def _draw_text(self, canvas: Canvas, origin: PagePoint, text: str, style: FieldStyle) -> None:
        canvas.saveState()
        try:
            canvas.setFont(self.config.font_for(style.font), style.font_size)
            canvas.setFillColorRGB(0, 0, 0)
            canvas.drawString(
                max(0.0, origin.x + self.config.text_padding),
                max(0.0, origin.y + style.font_size / 2),
                text,
            )
        finally:
            canvas.restoreState()

    def _draw_fallback(self, canvas: Canvas, origin: PagePoint) -> None:
        canvas.saveState()
        try:
            canvas.setFont(self.config.fallback_font, self.config.fallback_font_size)
            canvas.setFillColorRGB(0, 0, 0)
            canvas.drawString(max(0.0, origin.x), max(0.0, origin.y), self.config.fallback_text)
        finally:
            canvas.restoreState()


__all__ = ["ContentEmbedder", "decode_image_data", "is_image_data", "IMAGE_PREFIX"]
