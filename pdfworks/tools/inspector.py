"""Plugin exposing document validation."""

from __future__ import annotations

from ..core.validator import is_valid_document
from .common.interfaces import BaseTool
from .common.pipeline import register_tool


@register_tool("validate")
class ValidateTool(BaseTool):
    """Check that a file parses as a PDF document."""

    def run(self) -> bool:
        context = self.context
        result = is_valid_document(context.require_input(), password=context.config.get("password"))
        context.resources["result"] = result
        return result
