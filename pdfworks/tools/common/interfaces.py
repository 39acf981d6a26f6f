"""Core interfaces and context objects shared by pdfworks tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...core.config import DEFAULT_CONFIG, EngineConfig
from ...core.utils import resolve_path


@dataclass
class OperationContext:
    """Holds shared execution state for a tool invocation."""

    input_path: Path | None = None
    output_path: Path | None = None
    engine: EngineConfig = DEFAULT_CONFIG
    resources: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.input_path is not None:
            self.input_path = resolve_path(self.input_path)
        if self.output_path is not None:
            self.output_path = resolve_path(self.output_path)

    def require_input(self) -> Path:
        if self.input_path is None:
            raise ValueError("This tool requires an input path")
        return self.input_path

    def require_output(self) -> Path:
        if self.output_path is None:
            raise ValueError("This tool requires an output path")
        return self.output_path

    def write_output(self, data: bytes) -> Path:
        output = self.require_output()
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(data)
        return output


class BaseTool:
    """Base class for all pluggable pdfworks tools."""

    name: str

    def __init__(self, context: OperationContext) -> None:
        self.context = context

    def run(self) -> Any:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError
