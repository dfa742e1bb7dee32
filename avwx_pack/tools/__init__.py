"""
Formula system for the AVWX pack.

Each formula is a Tool with a host-facing ToolDefinition (parameters plus
result schema) and an async execute that performs one fetch.
"""

from .base import ParameterType, ResultType, Tool, ToolDefinition, ToolParameter
from .context import ToolExecutionContext
from .registry import ToolRegistry, tool_registry

__all__ = [
    "ParameterType",
    "ResultType",
    "Tool",
    "ToolDefinition",
    "ToolExecutionContext",
    "ToolParameter",
    "ToolRegistry",
    "tool_registry",
]
