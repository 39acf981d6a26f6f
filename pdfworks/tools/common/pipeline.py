"""Registry mapping tool names to pdfworks tool classes."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Tuple

from ...core.utils import get_logger
from .interfaces import BaseTool, OperationContext

LOGGER = get_logger("pdfworks.tools")


class ToolRegistry:
    """Named tool classes, instantiated per invocation with an :class:`OperationContext`."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class

    def create(self, name: str, context: OperationContext) -> BaseTool:
        try:
            tool_class = self._tools[name]
        except KeyError as exc:
            raise KeyError(f"Tool '{name}' is not registered") from exc
        return tool_class(context)

    def run(self, name: str, context: OperationContext) -> Any:
        """Create and run tool ``name``; errors propagate to the caller."""

        tool = self.create(name, context)
        LOGGER.debug(
            "Running tool '%s' (input=%s, output=%s)", name, context.input_path, context.output_path
        )
        result = tool.run()
        LOGGER.info("Tool '%s' finished", name)
        return result

    def names(self) -> Iterable[str]:
        return sorted(self._tools.keys())

    def get(self, name: str) -> type[BaseTool] | None:
        return self._tools.get(name)

    def summaries(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(name, first docstring line)`` for every tool, sorted by name."""

        for name in self.names():
            doc = (self._tools[name].__doc__ or "").strip()
            yield name, doc.splitlines()[0] if doc else ""


registry = ToolRegistry()


def register_tool(name: str):
    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls)
        cls.name = name
        return cls

    return decorator


__all__ = ["ToolRegistry", "registry", "register_tool"]
