"""Plugins exposing rotation, page numbering and watermarking."""

from __future__ import annotations

from pathlib import Path

from ..core.utils import get_logger
from ..transform.numbering import PageNumberSpec, add_page_numbers
from ..transform.rotate import rotate_document
from ..transform.watermark import WatermarkSpec, add_watermark
from .common.interfaces import BaseTool
from .common.pipeline import register_tool

LOGGER = get_logger("pdfworks.tools.transform")


@register_tool("rotate")
class RotateTool(BaseTool):
    """Set the rotation of every page."""

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        angle = int(context.config.get("angle", 90))

        LOGGER.debug("Rotating %s by %d degrees", source, angle)
        result = context.write_output(rotate_document(source, angle))
        context.resources["result"] = result
        return result


@register_tool("page-numbers")
class PageNumbersTool(BaseTool):
    """Stamp running page numbers."""

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        config = context.config
        spec = PageNumberSpec(
            position=config.get("position", "bottom-center"),
            font_size=float(config.get("font_size", 12)),
            start_page=int(config.get("start_page", 1)),
        )

        LOGGER.debug("Numbering %s with %s", source, spec)
        result = context.write_output(add_page_numbers(source, spec, config=context.engine))
        context.resources["result"] = result
        return result


@register_tool("watermark")
class WatermarkTool(BaseTool):
    """Overlay a text watermark on every page."""

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        config = context.config
        text = config.get("text")
        if not text:
            raise ValueError("Watermark tool requires text")
        spec = WatermarkSpec(
            text=text,
            opacity=float(config.get("opacity", 0.3)),
            font_size=float(config.get("font_size", 50)),
            rotation=float(config.get("rotation", -45)),
            color=tuple(config.get("color", (0.7, 0.7, 0.7))),
        )

        LOGGER.debug("Watermarking %s with %r", source, spec.text)
        result = context.write_output(add_watermark(source, spec, config=context.engine))
        context.resources["result"] = result
        return result
