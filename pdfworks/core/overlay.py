"""Draw content onto existing pages through single-page reportlab overlays.

Content is drawn on a reportlab canvas sized to the target page, rendered to
a one-page PDF and merged on top of the page with pypdf.
"""

from __future__ import annotations

import io

from pypdf import PageObject, PdfReader, Transformation
from reportlab.pdfgen import canvas

from .geometry import PageSize


class PageOverlay:
    """A drawing surface for one page, merged onto it by :meth:`apply`."""

    def __init__(self, size: PageSize) -> None:
        self.size = size
        self._buffer = io.BytesIO()
        self.canvas = canvas.Canvas(self._buffer, pagesize=(size.width, size.height))

    def render(self) -> PageObject:
        self.canvas.showPage()
        self.canvas.save()
        self._buffer.seek(0)
        return PdfReader(self._buffer).pages[0]

    def apply(self, page: PageObject) -> None:
        """Merge the overlay above ``page``'s existing content."""

        overlay_page = self.render()
        box = page.mediabox
        left, bottom = float(box.left), float(box.bottom)
        if left or bottom:
            page.merge_transformed_page(overlay_page, Transformation().translate(left, bottom))
        else:
            page.merge_page(overlay_page)


__all__ = ["PageOverlay"]
