"""Utilities shared by pdfworks components."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

Source = Union[bytes, bytearray, memoryview, str, Path]


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def set_log_level(level: int) -> None:
    """Apply ``level`` to every ``pdfworks`` logger created so far."""

    for name in list(logging.root.manager.loggerDict):
        if name == "pdfworks" or name.startswith("pdfworks."):
            logging.getLogger(name).setLevel(level)


def resolve_path(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Path must not be None")
    return Path(path).expanduser().resolve()


def read_source(source: Source) -> bytes:
    """Return the raw bytes behind ``source``.

    Bytes-like objects are returned as ``bytes``; strings and paths are read
    from disk.
    """

    if isinstance(source, bytes):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    return resolve_path(source).read_bytes()


def describe_source(source: Source) -> str:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return f"<{len(source)} bytes>"
    return str(source)


__all__ = ["Source", "get_logger", "set_log_level", "resolve_path", "read_source", "describe_source"]
