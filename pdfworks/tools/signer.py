"""Plugin exposing field placement (signing) through the registry."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

from ..core.utils import get_logger
from ..fields.mutator import embed_fields
from ..fields.types import FieldPlacement, SignerDetails
from .common.interfaces import BaseTool
from .common.pipeline import register_tool

LOGGER = get_logger("pdfworks.tools.sign")


def _coerce_placements(items: Iterable[FieldPlacement | Mapping[str, Any]]) -> list[FieldPlacement]:
    return [
        item if isinstance(item, FieldPlacement) else FieldPlacement.from_mapping(item)
        for item in items
    ]


@register_tool("sign")
class SignTool(BaseTool):
    """Embed signatures and form fields at editor positions."""

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        placements = _coerce_placements(context.config.get("placements") or [])
        signer: SignerDetails | None = context.config.get("signer")

        LOGGER.debug("Embedding %d placement(s) into %s", len(placements), source)
        report = embed_fields(source, placements, signer=signer, config=context.engine)
        result = context.write_output(report.data)
        context.resources["report"] = report
        context.resources["result"] = result
        return result
