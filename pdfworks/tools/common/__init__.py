"""Shared tool context and registry."""

from __future__ import annotations

from .interfaces import BaseTool, OperationContext
from .pipeline import ToolRegistry, register_tool, registry

__all__ = ["BaseTool", "OperationContext", "ToolRegistry", "register_tool", "registry"]
