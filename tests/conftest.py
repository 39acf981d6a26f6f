from __future__ import annotations

import base64
import io
import sys
from pathlib import Path
from typing import Callable, Sequence

import pytest
from PIL import Image
from pypdf import PdfWriter
from reportlab.pdfgen import canvas

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _write(writer: PdfWriter) -> bytes:
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture()
def blank_pdf_factory() -> Callable[..., bytes]:
    def _create(
        pages: int = 1,
        *,
        width: float = 612,
        height: float = 792,
        title: str | None = None,
        rotation: int = 0,
    ) -> bytes:
        writer = PdfWriter()
        for _ in range(pages):
            page = writer.add_blank_page(width=width, height=height)
            if rotation:
                page.rotation = rotation
        if title is not None:
            writer.add_metadata({"/Title": title, "/Producer": "pdfworks-tests"})
        return _write(writer)

    return _create


@pytest.fixture()
def text_pdf_factory() -> Callable[..., bytes]:
    """Build a document whose pages carry the given text lines."""

    def _create(lines: Sequence[str], *, pagesize: tuple[float, float] = (612, 792)) -> bytes:
        buffer = io.BytesIO()
        document = canvas.Canvas(buffer, pagesize=pagesize)
        for line in lines:
            document.setFont("Helvetica", 14)
            document.drawString(72, pagesize[1] - 72, line)
            document.showPage()
        document.save()
        return buffer.getvalue()

    return _create


@pytest.fixture()
def sample_pdf(tmp_path: Path, text_pdf_factory: Callable[..., bytes]) -> Path:
    pdf_path = tmp_path / "sample.pdf"
    pdf_path.write_bytes(text_pdf_factory([f"Sample page {number}" for number in range(1, 6)]))
    return pdf_path


@pytest.fixture()
def three_page_pdf(text_pdf_factory: Callable[..., bytes]) -> bytes:
    return text_pdf_factory(["Alpha page", "Beta page", "Gamma page"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    return _write(PdfWriter())


def _image_bytes(fmt: str, size: tuple[int, int], color: tuple[int, int, int]) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    return _image_bytes("PNG", (40, 20), (200, 30, 30))


@pytest.fixture()
def jpeg_bytes() -> bytes:
    return _image_bytes("JPEG", (30, 60), (30, 30, 200))


@pytest.fixture()
def png_data_uri(png_bytes: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture()
def jpeg_data_uri(jpeg_bytes: bytes) -> str:
    return "data:image/jpeg;base64," + base64.b64encode(jpeg_bytes).decode("ascii")
