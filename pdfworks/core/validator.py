"""Pre-flight validation of PDF byte buffers."""

from __future__ import annotations

from .document import load_document
from .exceptions import ParseError
from .utils import Source, get_logger

LOGGER = get_logger("pdfworks.validator")


def is_valid_document(source: Source, *, password: str | None = None) -> bool:
    """Return ``True`` when ``source`` parses as a PDF document.

    Encrypted documents count as valid only when ``password`` (or the empty
    password) opens them. Never raises.
    """

    try:
        load_document(source, password=password)
    except ParseError as exc:
        LOGGER.debug("Validation failed: %s", exc)
        return False
    except Exception as exc:  # validation must never raise
        LOGGER.debug("Validation failed unexpectedly: %s", exc)
        return False
    return True


__all__ = ["is_valid_document"]
