"""Structural operations: split, merge and image-to-PDF synthesis."""

from __future__ import annotations

from .images import SUPPORTED_IMAGE_TYPES, ImageSource, fit_image, images_to_document
from .merge import merge_documents
from .split import PageRange, build_output_filename, parse_page_ranges, split_document, split_ranges

__all__ = [
    "SUPPORTED_IMAGE_TYPES",
    "ImageSource",
    "fit_image",
    "images_to_document",
    "merge_documents",
    "PageRange",
    "build_output_filename",
    "parse_page_ranges",
    "split_document",
    "split_ranges",
]
