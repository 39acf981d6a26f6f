"""Coordinate mapping between the editor's percentage space and PDF points.

The editor positions content as percentages of the rendered page container
with a top-left origin. PDF user space is measured in points from the
bottom-left corner of the page.
"""

from __future__ import annotations

from typing import NamedTuple


class PageSize(NamedTuple):
    width: float
    height: float


class PagePoint(NamedTuple):
    x: float
    y: float


def map_to_page_space(
    page_size: PageSize,
    x_percent: float,
    y_percent: float,
    content_width: float,
    content_height: float,
) -> PagePoint:
    """Return the PDF draw origin for a content box anchored at a UI position.

    The anchor is the visual top-left corner of the box, so the box height is
    subtracted to get the bottom-left draw origin. Results may be negative;
    callers floor them to zero when drawing.
    """

    width, height = page_size
    x = (x_percent / 100) * width
    y = height - (y_percent / 100) * height - content_height
    return PagePoint(x, y)


def pointer_to_percent(
    offset_x: float,
    offset_y: float,
    *,
    container_width: float,
    container_height: float,
    box_width: float,
    box_height: float,
    zoom: float = 1.0,
) -> tuple[float, float]:
    """Convert a pointer offset inside the page container to percentages.

    ``offset_x``/``offset_y`` are measured from the container's top-left corner
    to the box's top-left corner. The result is constrained so the whole box
    (rendered at ``zoom``) stays inside the container.
    """

    if container_width <= 0 or container_height <= 0:
        raise ValueError("Container dimensions must be positive")
    if zoom <= 0:
        raise ValueError("Zoom must be positive")

    x = offset_x / container_width * 100
    y = offset_y / container_height * 100
    max_x = 100 - (box_width * zoom / container_width * 100)
    max_y = 100 - (box_height * zoom / container_height * 100)
    return (max(0.0, min(max_x, x)), max(0.0, min(max_y, y)))


def percent_to_pixels(
    x_percent: float,
    y_percent: float,
    *,
    container_width: float,
    container_height: float,
) -> tuple[float, float]:
    return (x_percent / 100 * container_width, y_percent / 100 * container_height)


__all__ = ["PageSize", "PagePoint", "map_to_page_space", "pointer_to_percent", "percent_to_pixels"]
