"""Namespace for pluggable pdfworks tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from . import assembler  # noqa: F401  # register split, merge and images tools
    from . import encryptor  # noqa: F401
    from . import inspector  # noqa: F401
    from . import signer  # noqa: F401
    from . import transformer  # noqa: F401


__all__ = ["registry", "load_builtin_plugins"]
