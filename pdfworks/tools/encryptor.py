"""Plugin exposing password protection."""

from __future__ import annotations

from pathlib import Path

from ..core.exceptions import ProtectionError
from ..core.utils import get_logger
from ..transform.security import protect_document, unprotect_document
from .common.interfaces import BaseTool
from .common.pipeline import register_tool

LOGGER = get_logger("pdfworks.tools.encrypt")


@register_tool("protect")
class ProtectTool(BaseTool):
    """Encrypt a document with a password."""

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        password = context.config.get("password")
        if not password:
            raise ProtectionError("A password is required for encryption")

        LOGGER.debug("Protecting %s to %s", source, context.output_path)
        result = context.write_output(protect_document(source, password, config=context.engine))
        context.resources["result"] = result
        return result


@register_tool("unprotect")
class UnprotectTool(BaseTool):
    """Remove password protection from a document."""

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        password = context.config.get("password")
        if not password:
            raise ProtectionError("A password is required for decryption")

        LOGGER.debug("Removing protection from %s to %s", source, context.output_path)
        result = context.write_output(unprotect_document(source, password))
        context.resources["result"] = result
        return result
