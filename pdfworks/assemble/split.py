"""Split a document into single pages or page ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from pypdf import PdfReader, PdfWriter

from ..core.document import copy_metadata, load_document, serialize
from ..core.exceptions import InvalidPageRangeError
from ..core.utils import Source, get_logger

LOGGER = get_logger("pdfworks.assemble.split")


@dataclass(frozen=True)
class PageRange:
    """Represents an inclusive, 1-based page range."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1 or self.end < 1:
            raise ValueError("Page numbers must be positive integers")
        if self.start > self.end:
            raise ValueError("Page range start must be less than or equal to end")

    def label(self) -> str:
        """Return a filename-friendly label for the range."""

        if self.start == self.end:
            return f"page_{self.start}"
        return f"pages_{self.start}-{self.end}"


def _range_tokens_from_iterable(ranges: Iterable[object]) -> Iterator[str]:
    for item in ranges:
        if isinstance(item, PageRange):
            yield f"{item.start}-{item.end}"
        elif isinstance(item, str):
            yield from (token.strip() for token in item.split(",") if token.strip())
        elif isinstance(item, Sequence) and len(item) == 2:
            yield f"{item[0]}-{item[1]}"
        elif isinstance(item, int):
            yield str(item)
        else:
            raise InvalidPageRangeError(ranges)


def parse_page_ranges(
    ranges: str | Sequence[object] | None,
    *,
    total_pages: int,
) -> List[PageRange]:
    """Parse ``ranges`` such as ``"1-3, 5-7, 10"`` into :class:`PageRange` values.

    Args:
        ranges: Comma-separated string, or a sequence of strings, integers,
            pairs or :class:`PageRange` objects.
        total_pages: Page count of the source document, used for validation.

    Raises:
        InvalidPageRangeError: If the ranges cannot be parsed or fall outside
            the document.

    Returns:
        The ranges in the order they were supplied.
    """

    if ranges is None:
        raise InvalidPageRangeError([ranges])

    if isinstance(ranges, str):
        tokens = [token.strip() for token in ranges.split(",") if token.strip()]
    elif isinstance(ranges, Sequence):
        tokens = list(_range_tokens_from_iterable(ranges))
    else:
        raise InvalidPageRangeError([ranges])

    parsed: List[PageRange] = []
    for token in tokens:
        start_str, _, end_str = token.partition("-")
        try:
            start = int(start_str)
            end = int(end_str) if end_str else start
        except ValueError as exc:
            raise InvalidPageRangeError([token]) from exc

        if start < 1 or end < 1 or end > total_pages or start > end:
            raise InvalidPageRangeError([token])
        parsed.append(PageRange(start, end))

    if not parsed:
        raise InvalidPageRangeError([ranges])

    return parsed


def _extract(reader: PdfReader, page_indices: Iterable[int]) -> bytes:
    writer = PdfWriter()
    for page_index in page_indices:
        writer.add_page(reader.pages[page_index])
    copy_metadata(reader, writer)
    return serialize(writer)


def split_document(source: Source) -> list[bytes]:
    """Return one single-page document per page of ``source``, in page order.

    A document without pages yields an empty list.

    Raises:
        ParseError: If ``source`` is not a loadable PDF document.
    """

    reader = load_document(source)
    outputs: list[bytes] = []
    for page_index in range(len(reader.pages)):
        LOGGER.debug("Extracting page %d", page_index + 1)
        outputs.append(_extract(reader, [page_index]))

    LOGGER.info("Split document into %d page(s)", len(outputs))
    return outputs


def split_ranges(source: Source, ranges: str | Sequence[object]) -> list[bytes]:
    """Return one document per page range, in the order the ranges are given.

    Raises:
        ParseError: If ``source`` is not a loadable PDF document.
        InvalidPageRangeError: If ``ranges`` is malformed or out of bounds.
    """

    reader = load_document(source)
    page_ranges = parse_page_ranges(ranges, total_pages=len(reader.pages))
    outputs: list[bytes] = []
    for page_range in page_ranges:
        LOGGER.debug("Extracting pages %d-%d", page_range.start, page_range.end)
        outputs.append(_extract(reader, range(page_range.start - 1, page_range.end)))

    LOGGER.info("Split document into %d range(s)", len(outputs))
    return outputs


def build_output_filename(base_name: str, part: PageRange | int) -> str:
    """Construct a filename for one split output."""

    safe_base = base_name.replace(" ", "_")
    if isinstance(part, PageRange):
        suffix = part.label()
    else:
        suffix = f"page_{part}"
    return f"{safe_base}_{suffix}.pdf"


__all__ = [
    "PageRange",
    "parse_page_ranges",
    "split_document",
    "split_ranges",
    "build_output_filename",
]
