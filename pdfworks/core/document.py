"""Load, clone and serialize PDF documents with pypdf.

Every operation owns the reader and writer it creates here for its whole
duration; nothing is cached between calls.
"""

from __future__ import annotations

import io

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from .exceptions import ParseError
from .geometry import PageSize
from .utils import Source, describe_source, get_logger, read_source

LOGGER = get_logger("pdfworks.document")


def load_document(
    source: Source,
    *,
    password: str | None = None,
    label: str | None = None,
) -> PdfReader:
    """Parse ``source`` into a :class:`PdfReader` with its page tree loaded.

    Encrypted documents are opened with ``password`` (or the empty password).

    Raises:
        ParseError: If the bytes cannot be read, parsed or decrypted.
    """

    name = label or describe_source(source)
    try:
        raw_bytes = read_source(source)
    except OSError as exc:
        raise ParseError(f"Unable to read PDF: {name}. Error: {exc}", source=name) from exc

    if not raw_bytes:
        raise ParseError(f"PDF is empty: {name}", source=name)

    try:
        reader = PdfReader(io.BytesIO(raw_bytes))
        if reader.is_encrypted and reader.decrypt(password or "") == 0:
            raise ParseError(
                f"PDF is encrypted and the password does not open it: {name}", source=name
            )
        page_count = len(reader.pages)
    except ParseError:
        raise
    except PdfReadError as exc:
        raise ParseError(f"Corrupted or invalid PDF: {name}. Error: {exc}", source=name) from exc
    except Exception as exc:  # pypdf raises a wide range of errors on malformed input
        raise ParseError(f"Unexpected error reading PDF: {name}. Error: {exc}", source=name) from exc

    LOGGER.debug("Loaded %s with %d page(s)", name, page_count)
    return reader


def copy_metadata(reader: PdfReader, writer: PdfWriter) -> None:
    metadata = reader.metadata
    if metadata:
        writer.add_metadata(
            {
                key: str(value)
                for key, value in metadata.items()
                if isinstance(key, str) and value is not None
            }
        )


def clone_document(reader: PdfReader) -> PdfWriter:
    """Return a writer holding a full copy of ``reader``'s document."""

    writer = PdfWriter()
    writer.clone_reader_document_root(reader)
    copy_metadata(reader, writer)
    return writer


def serialize(writer: PdfWriter) -> bytes:
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def page_size(page: PageObject) -> PageSize:
    """Return the media box size of ``page`` in points, ignoring rotation."""

    box = page.mediabox
    return PageSize(float(box.width), float(box.height))


__all__ = ["load_document", "clone_document", "copy_metadata", "serialize", "page_size"]
