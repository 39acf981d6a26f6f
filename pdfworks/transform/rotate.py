"""Set the rotation of every page in a document."""

from __future__ import annotations

from ..core.document import clone_document, load_document, serialize
from ..core.exceptions import RotationError
from ..core.utils import Source, get_logger

LOGGER = get_logger("pdfworks.transform.rotate")

VALID_ANGLES = (90, 180, 270)


def rotate_document(source: Source, angle: int) -> bytes:
    """Return ``source`` with every page's rotation set to ``angle`` degrees.

    The angle replaces any rotation already declared on a page rather than
    adding to it.

    Raises:
        ParseError: If ``source`` is not a loadable PDF document.
        RotationError: If ``angle`` is not 90, 180 or 270, or the document
            cannot be rewritten.
    """

    if angle not in VALID_ANGLES:
        raise RotationError(f"Rotation angle must be one of {VALID_ANGLES}, got {angle!r}")

    reader = load_document(source)
    writer = clone_document(reader)
    try:
        for index, page in enumerate(writer.pages):
            LOGGER.debug("Setting rotation of page %d to %d", index + 1, angle)
            page.rotation = int(angle)
        data = serialize(writer)
    except Exception as exc:  # pypdf errors vary
        raise RotationError(f"Failed to rotate PDF: {exc}") from exc

    LOGGER.info("Rotated %d page(s) to %d degrees", len(writer.pages), angle)
    return data


__all__ = ["rotate_document", "VALID_ANGLES"]
