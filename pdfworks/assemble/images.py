"""Synthesize a document from raster images, one page per image."""

from __future__ import annotations

import io
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple, Union

from PIL import Image, UnidentifiedImageError
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..core.config import DEFAULT_CONFIG, EngineConfig
from ..core.exceptions import AssemblyError, UnsupportedImageType
from ..core.utils import get_logger, resolve_path

LOGGER = get_logger("pdfworks.assemble.images")

SUPPORTED_IMAGE_TYPES = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
}


@dataclass(frozen=True)
class ImageSource:
    data: bytes
    mime: str

    @classmethod
    def from_path(cls, path: str | Path) -> "ImageSource":
        resolved = resolve_path(path)
        mime, _ = mimetypes.guess_type(resolved.name)
        return cls(resolved.read_bytes(), mime or "application/octet-stream")


ImageInput = Union[ImageSource, Tuple[bytes, str]]


def fit_image(
    image_width: float,
    image_height: float,
    page_width: float,
    page_height: float,
    margin: float,
) -> tuple[float, float, float, float]:
    """Return ``(x, y, width, height)`` placing an image centered on a page.

    The image keeps its aspect ratio and fits inside the page minus
    ``margin`` on every side. It is constrained by width when it is wider,
    relative to its height, than the available area, otherwise by height.
    """

    if image_width <= 0 or image_height <= 0:
        raise ValueError("Image dimensions must be positive")

    available_width = page_width - 2 * margin
    available_height = page_height - 2 * margin
    if available_width <= 0 or available_height <= 0:
        raise ValueError("Margin leaves no room for the image")

    image_ratio = image_width / image_height
    if image_ratio > available_width / available_height:
        width = available_width
        height = available_width / image_ratio
    else:
        height = available_height
        width = available_height * image_ratio

    x = (page_width - width) / 2
    y = (page_height - height) / 2
    return (x, y, width, height)


def _coerce(image: ImageInput) -> ImageSource:
    if isinstance(image, ImageSource):
        return image
    data, mime = image
    return ImageSource(bytes(data), mime)


def _open_image(source: ImageSource, position: int) -> Image.Image:
    expected = SUPPORTED_IMAGE_TYPES.get((source.mime or "").lower())
    if expected is None:
        raise UnsupportedImageType(source.mime, position)
    try:
        image = Image.open(io.BytesIO(source.data))
        image.load()
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise AssemblyError(f"Image #{position} could not be decoded: {exc}") from exc
    if image.format != expected:
        raise AssemblyError(
            f"Image #{position} is declared as {source.mime} but decoded as {image.format}"
        )
    return image


def images_to_document(
    images: Iterable[ImageInput],
    *,
    page_size: tuple[float, float] | None = None,
    config: EngineConfig | None = None,
) -> bytes:
    """Return a document with one page per image, in input order.

    Each page has the configured default size; the image is scaled to fit
    inside the configured margin, keeping its aspect ratio, and centered.

    Raises:
        UnsupportedImageType: If an image is not declared as PNG or JPEG.
        AssemblyError: If no images are given or an image cannot be decoded.
    """

    config = config or DEFAULT_CONFIG
    page_width, page_height = page_size or config.page_size
    sources = [_coerce(image) for image in images]
    if not sources:
        raise AssemblyError("No images provided")

    opened = [_open_image(source, position) for position, source in enumerate(sources, start=1)]

    buffer = io.BytesIO()
    document = canvas.Canvas(buffer, pagesize=(page_width, page_height))
    try:
        for position, image in enumerate(opened, start=1):
            x, y, width, height = fit_image(
                image.width, image.height, page_width, page_height, config.image_margin
            )
            LOGGER.debug(
                "Placing image #%d (%dx%d) at x=%.2f, y=%.2f, %.2fx%.2f",
                position,
                image.width,
                image.height,
                x,
                y,
                width,
                height,
            )
            document.drawImage(ImageReader(image), x, y, width=width, height=height, mask="auto")
            document.showPage()
        document.save()
    except Exception as exc:  # reportlab errors vary
        raise AssemblyError(f"Failed to write image PDF: {exc}") from exc

    LOGGER.info("Created document from %d image(s)", len(opened))
    return buffer.getvalue()


__all__ = ["ImageSource", "SUPPORTED_IMAGE_TYPES", "fit_image", "images_to_document"]
