"""
Base classes for the AVWX formula system.

This module defines the core abstractions that every formula implements:
the parameter contract shown to the host, the result schema the host
validates against, and the async execute entry point.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Sequence, Type
from enum import Enum
import logging

from pydantic import BaseModel, TypeAdapter

logger = logging.getLogger(__name__)


class ParameterType(Enum):
    """Primitive parameter types the host validates before execution."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class ResultType(Enum):
    """Shape of a formula result."""
    OBJECT = "object"
    ARRAY = "array"


@dataclass
class ToolParameter:
    """Definition of a formula parameter."""
    name: str
    type: ParameterType
    description: str
    optional: bool = False

    @property
    def required(self) -> bool:
        return not self.optional

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "description": self.description,
            "optional": self.optional,
        }

    def accepts(self, value: Any) -> bool:
        """Primitive type check, the only validation done on parameters."""
        if self.type == ParameterType.STRING:
            return isinstance(value, str)
        if self.type == ParameterType.NUMBER:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, bool)


@dataclass
class ToolDefinition:
    """
    Host-facing formula definition.

    Contains the metadata needed to expose a formula: its parameters in call
    order, the result shape and the pydantic model the result is validated
    against.
    """
    name: str
    description: str
    result_model: Type[BaseModel]
    result_type: ResultType = ResultType.OBJECT
    parameters: List[ToolParameter] = field(default_factory=list)
    network_domain: str = "avwx.rest"

    def result_schema(self) -> Dict[str, Any]:
        """JSON schema of the declared result."""
        item_schema = self.result_model.model_json_schema()
        if self.result_type == ResultType.ARRAY:
            return {"type": "array", "items": item_schema}
        return item_schema

    def result_adapter(self) -> TypeAdapter:
        if self.result_type == ResultType.ARRAY:
            return TypeAdapter(List[self.result_model])
        return TypeAdapter(self.result_model)

    def to_manifest(self) -> Dict[str, Any]:
        """
        Convert to the manifest entry the host registers.

        Format:
        {
            "name": "Station",
            "description": "...",
            "parameters": [{"name": ..., "type": ..., "description": ..., "optional": ...}],
            "result_type": "object",
            "schema": {...}
        }
        """
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [p.to_dict() for p in self.parameters],
            "result_type": self.result_type.value,
            "network_domain": self.network_domain,
            "schema": self.result_schema(),
        }


class Tool(ABC):
    """
    Abstract base class for all formulas.

    All formulas must inherit from this class and implement:
    - definition property: Returns ToolDefinition with metadata
    - execute method: Performs the lookup and returns the decoded body
    """

    @property
    @abstractmethod
    def definition(self) -> ToolDefinition:
        """Return formula definition with metadata."""
        pass

    @abstractmethod
    async def execute(
        self,
        parameters: Dict[str, Any],
        context: 'ToolExecutionContext'
    ) -> Any:
        """
        Execute the formula with given parameters and context.

        Args:
            parameters: Validated formula parameters keyed by name
            context: Request-scoped context holding the fetch capability

        Returns:
            The decoded response body (dict or list)

        Raises:
            FetchFailedError: If the upstream status is not 200
        """
        pass

    def validate_parameters(self, parameters: Dict[str, Any]) -> bool:
        """
        Validate parameter presence and primitive type.

        Semantic validation (ICAO format, coordinate range) is left to the
        upstream API.

        Raises:
            ValueError: If validation fails with specific error message
        """
        known = {p.name for p in self.definition.parameters}
        unknown = sorted(set(parameters) - known)
        if unknown:
            raise ValueError(f"Unknown parameter(s) for {self.definition.name}: {', '.join(unknown)}")

        for param in self.definition.parameters:
            value = parameters.get(param.name)
            if value is None:
                if param.required:
                    raise ValueError(f"Missing required parameter: {param.name}")
                continue
            if not param.accepts(value):
                raise ValueError(
                    f"Invalid value for {param.name}. "
                    f"Expected {param.type.value}, got {type(value).__name__}"
                )

        return True

    def bind_arguments(self, arguments: Sequence[Any]) -> Dict[str, Any]:
        """Map positional arguments, in declaration order, to parameter names."""
        params = self.definition.parameters
        if len(arguments) > len(params):
            raise ValueError(
                f"{self.definition.name} takes at most {len(params)} argument(s), got {len(arguments)}"
            )
        return {p.name: value for p, value in zip(params, arguments)}
