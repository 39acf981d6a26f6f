"""
Custom exceptions for pdfworks.

Document-level failures are raised to the caller; placement-level failures
inside a signing batch are recorded as outcomes instead (see
:mod:`pdfworks.fields.types`).
"""

from __future__ import annotations

from typing import Iterable


class PdfWorksError(Exception):
    """Base exception for all pdfworks errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown pdfworks error occurred."


class ParseError(PdfWorksError):
    """Raised when input bytes are not a loadable PDF document."""

    def __init__(self, message: str = "", *, source: str | None = None) -> None:
        self.source = source
        if not message and source:
            message = f"Unable to parse PDF document: {source}"
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF document."


class UnsupportedImageType(PdfWorksError):
    """Raised when an image is neither PNG nor JPEG."""

    def __init__(self, mime: str | None, index: int | None = None) -> None:
        self.mime = mime
        self.index = index
        where = f" (image #{index})" if index is not None else ""
        super().__init__(f"Unsupported image type {mime!r}{where}; expected PNG or JPEG")


class RotationError(PdfWorksError):
    @property
    def default_message(self) -> str:
        return "Failed to rotate PDF document."


class PageNumberError(PdfWorksError):
    @property
    def default_message(self) -> str:
        return "Failed to add page numbers to PDF document."


class WatermarkError(PdfWorksError):
    @property
    def default_message(self) -> str:
        return "Failed to add watermark to PDF document."


class ProtectionError(PdfWorksError):
    """Raised when password protection or removal fails."""

    @property
    def default_message(self) -> str:
        return "Failed to change PDF password protection."


class AssemblyError(PdfWorksError):
    """Raised when split, merge or image synthesis cannot produce a document."""

    @property
    def default_message(self) -> str:
        return "Failed to assemble PDF document."


class InvalidPageRangeError(PdfWorksError):
    """Raised when the provided page ranges cannot be parsed or validated."""

    def __init__(self, ranges: Iterable[object]) -> None:
        self.ranges = list(ranges)
        super().__init__(f"Invalid or empty page ranges provided: {self.ranges!r}")


__all__ = [
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
