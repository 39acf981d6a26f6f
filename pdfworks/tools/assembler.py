"""Plugins exposing split, merge and image-to-PDF assembly."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from ..assemble.images import ImageSource, images_to_document
from ..assemble.merge import merge_documents
from ..assemble.split import (
    PageRange,
    build_output_filename,
    parse_page_ranges,
    split_document,
    split_ranges,
)
from ..core.document import load_document
from ..core.exceptions import AssemblyError
from ..core.utils import get_logger
from .common.interfaces import BaseTool
from .common.pipeline import register_tool

LOGGER = get_logger("pdfworks.tools.assemble")


@register_tool("split")
class SplitTool(BaseTool):
    """Split a document into single pages or page ranges."""

    def run(self) -> list[Path]:
        context = self.context
        source = context.require_input()
        output_dir = context.require_output()
        output_dir.mkdir(parents=True, exist_ok=True)
        base_name = source.stem

        mode = context.config.get("mode", "pages")
        parts: Sequence[PageRange | int]
        if mode == "pages":
            documents = split_document(source)
            parts = list(range(1, len(documents) + 1))
        elif mode == "range":
            ranges = context.config.get("ranges")
            total_pages = len(load_document(source).pages)
            parts = parse_page_ranges(ranges, total_pages=total_pages)
            documents = split_ranges(source, list(parts))
        else:
            raise ValueError(f"Unsupported split mode: {mode}")

        results: list[Path] = []
        for part, data in zip(parts, documents):
            destination = output_dir / build_output_filename(base_name, part)
            LOGGER.debug("Writing %s", destination)
            destination.write_bytes(data)
            results.append(destination)

        context.resources["result"] = results
        return results


@register_tool("merge")
class MergeTool(BaseTool):
    """Merge documents in order into one."""

    def run(self) -> Path:
        context = self.context
        inputs: Iterable[str | Path] | None = context.config.get("inputs")
        if inputs is None:
            if context.input_path is None:
                raise AssemblyError("No input PDFs provided")
            inputs = [context.input_path]

        inputs_list = [Path(item) for item in inputs]
        LOGGER.debug("Merging %d input(s) into %s", len(inputs_list), context.output_path)
        data = merge_documents(
            inputs_list,
            metadata=context.config.get("metadata", True),
            bookmarks=context.config.get("bookmarks"),
        )
        result = context.write_output(data)
        context.resources["result"] = result
        return result


@register_tool("images")
class ImagesTool(BaseTool):
    """Create a document with one page per PNG or JPEG image."""

    def run(self) -> Path:
        context = self.context
        inputs: Iterable[str | Path] = context.config.get("inputs") or []
        images = [ImageSource.from_path(path) for path in inputs]

        LOGGER.debug("Creating %s from %d image(s)", context.output_path, len(images))
        result = context.write_output(images_to_document(images, config=context.engine))
        context.resources["result"] = result
        return result
