"""Merge several documents into one."""

from __future__ import annotations

from typing import Iterable, Sequence

from pypdf import PdfReader, PdfWriter

from ..core.document import copy_metadata, load_document, serialize
from ..core.exceptions import AssemblyError, ParseError
from ..core.utils import Source, describe_source, get_logger

LOGGER = get_logger("pdfworks.assemble.merge")


def _load_input(source: Source, position: int) -> PdfReader:
    label = f"input #{position} ({describe_source(source)})"
    try:
        return load_document(source, label=label)
    except ParseError:
        LOGGER.error("Failed to load merge %s", label)
        raise


def merge_documents(
    sources: Iterable[Source],
    *,
    metadata: bool = True,
    bookmarks: Sequence[str] | None = None,
) -> bytes:
    """Merge ``sources`` in order and return the combined document.

    Every input is loaded before anything is written, so one bad input
    fails the whole merge.

    Args:
        sources: Documents to merge, as bytes or paths.
        metadata: When ``True`` the metadata of the first input is copied
            into the merged document.
        bookmarks: Optional outline titles, one per input, pointing at the
            first page contributed by that input.

    Raises:
        AssemblyError: If no inputs are given.
        ParseError: If an input cannot be loaded; the message names its
            1-based position.
    """

    inputs = list(sources)
    if not inputs:
        raise AssemblyError("No input PDFs provided")

    readers = [_load_input(source, position) for position, source in enumerate(inputs, start=1)]

    writer = PdfWriter()
    bookmark_targets: list[tuple[str, int]] = []
    for position, reader in enumerate(readers, start=1):
        start_page_index = len(writer.pages)
        for page_index, page in enumerate(reader.pages):
            LOGGER.debug("Adding page %d from input #%d", page_index + 1, position)
            writer.add_page(page)

        if bookmarks and position <= len(bookmarks) and bookmarks[position - 1]:
            if len(reader.pages):
                bookmark_targets.append((bookmarks[position - 1], start_page_index))

    if metadata:
        copy_metadata(readers[0], writer)

    for title, page_index in bookmark_targets:
        writer.add_outline_item(title, page_index)

    try:
        data = serialize(writer)
    except Exception as exc:  # pypdf errors vary
        raise AssemblyError(f"Failed to write merged PDF: {exc}") from exc

    LOGGER.info("Merged %d document(s) into %d page(s)", len(readers), len(writer.pages))
    return data


__all__ = ["merge_documents"]
