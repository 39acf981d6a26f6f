from __future__ import annotations

import io

import pytest
from pypdf import PdfReader

from pdfworks.assemble.merge import merge_documents
from pdfworks.assemble.split import (
    PageRange,
    build_output_filename,
    parse_page_ranges,
    split_document,
    split_ranges,
)
from pdfworks.core.exceptions import InvalidPageRangeError, ParseError
from pdfworks.core.validator import is_valid_document


def _texts(data: bytes) -> list[str]:
    return [page.extract_text() for page in PdfReader(io.BytesIO(data)).pages]


def test_split_yields_one_valid_document_per_page(three_page_pdf: bytes) -> None:
    parts = split_document(three_page_pdf)

    assert len(parts) == 3
    for part in parts:
        assert is_valid_document(part)
        assert len(PdfReader(io.BytesIO(part)).pages) == 1
    assert "Beta page" in _texts(parts[1])[0]


def test_split_then_merge_reconstructs_document(three_page_pdf: bytes) -> None:
    merged = merge_documents(split_document(three_page_pdf))

    assert _texts(merged) == _texts(three_page_pdf)


def test_split_empty_document(empty_pdf_bytes: bytes) -> None:
    assert split_document(empty_pdf_bytes) == []


def test_split_keeps_metadata(blank_pdf_factory) -> None:
    parts = split_document(blank_pdf_factory(2, title="Report"))

    assert PdfReader(io.BytesIO(parts[0])).metadata.get("/Title") == "Report"


def test_split_invalid_source() -> None:
    with pytest.raises(ParseError):
        split_document(b"garbage")


def test_split_ranges(sample_pdf) -> None:
    parts = split_ranges(sample_pdf, "1-2, 5")

    assert [len(PdfReader(io.BytesIO(part)).pages) for part in parts] == [2, 1]
    assert "Sample page 5" in _texts(parts[1])[0]


def test_parse_page_ranges_accepts_mixed_sequence() -> None:
    ranges = parse_page_ranges(["1-2", 4, (5, 6), PageRange(3, 3)], total_pages=6)

    assert ranges == [PageRange(1, 2), PageRange(4, 4), PageRange(5, 6), PageRange(3, 3)]


@pytest.mark.parametrize("ranges", [None, "", "0-1", "3-2", "1-9", "a-b", [object()]])
def test_parse_page_ranges_rejects_invalid(ranges) -> None:
    with pytest.raises(InvalidPageRangeError):
        parse_page_ranges(ranges, total_pages=5)


def test_page_range_validation() -> None:
    with pytest.raises(ValueError):
        PageRange(0, 1)
    with pytest.raises(ValueError):
        PageRange(3, 2)


def test_build_output_filename() -> None:
    assert build_output_filename("my report", 3) == "my_report_page_3.pdf"
    assert build_output_filename("doc", PageRange(2, 4)) == "doc_pages_2-4.pdf"
    assert build_output_filename("doc", PageRange(7, 7)) == "doc_page_7.pdf"
