"""
Formula registry - central repository for all available formulas.

Singleton pattern ensures only one registry exists across the application.
"""

from typing import Dict, List, Type, Optional, Any
from avwx_pack.tools.base import Tool, ToolDefinition
from avwx_pack.tools.context import ToolExecutionContext
import logging

from pydantic import ValidationError

logger = logging.getLogger(__name__)

AUTHENTICATION_TYPE = "header_bearer_token"


class ToolRegistry:
    """
    Singleton registry for all available formulas.

    Manages registration, lookup, invocation and manifest generation.
    """

    _instance = None

    # snake_case names used from the command line and config files
    TOOL_ALIASES = {
        "summary": "Summary",
        "station": "Station",
        "nearest_stations": "NearestStations",
        "nearest": "NearestStations",
        "station_search": "StationSearch",
        "search": "StationSearch",
        "metar": "Metar",
        "taf": "Taf",
    }

    def __new__(cls):
        """Singleton pattern - only one instance exists."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._tools: Dict[str, Tool] = {}
            cls._instance._initialized = False
        return cls._instance

    def register(self, tool_class: Type[Tool]) -> None:
        """
        Register a formula class.

        Args:
            tool_class: Tool class (not instance) to register

        Example:
            registry.register(StationTool)
        """
        self.register_instance(tool_class())

    def register_instance(self, tool: Tool) -> None:
        tool_name = tool.definition.name
        if tool_name in self._tools:
            logger.warning(f"Formula {tool_name} already registered, overwriting")
        self._tools[tool_name] = tool
        logger.info(f"Registered formula: {tool_name} ({tool.definition.result_type.value})")

    def get(self, name: str) -> Optional[Tool]:
        """
        Get formula by name, with alias and case-insensitive fallback.

        Returns:
            Tool instance or None if not found
        """
        raw_name = str(name or "").strip()
        tool = self._tools.get(raw_name)
        if tool:
            return tool

        canonical_name = self.TOOL_ALIASES.get(raw_name.lower())
        if canonical_name:
            return self._tools.get(canonical_name)

        folded = raw_name.casefold()
        for tool_name, tool in self._tools.items():
            if tool_name.casefold() == folded:
                return tool

        return None

    def has(self, name: str) -> bool:
        """Return True if a formula is registered under this exact name (no alias resolution)."""
        return name in self._tools

    def unregister(self, name: str) -> bool:
        """Unregister a formula by exact name (no alias resolution)."""
        if name in self._tools:
            self._tools.pop(name, None)
            logger.info(f"Unregistered formula: {name}")
            return True
        return False

    def get_all(self) -> List[Tool]:
        return list(self._tools.values())

    def get_definitions(self) -> List[ToolDefinition]:
        return [tool.definition for tool in self._tools.values()]

    def list_tools(self) -> List[str]:
        return list(self._tools.keys())

    def network_domains(self) -> List[str]:
        return sorted({tool.definition.network_domain for tool in self._tools.values()})

    def to_manifest(self) -> Dict[str, Any]:
        """
        Export the pack manifest: authentication, allowed domains and
        every formula definition.
        """
        return {
            "authentication": {"type": AUTHENTICATION_TYPE},
            "network_domains": self.network_domains(),
            "formulas": [definition.to_manifest() for definition in self.get_definitions()],
        }

    async def invoke(
        self,
        name: str,
        parameters: Dict[str, Any],
        context: ToolExecutionContext,
        *,
        validate_result: bool = True,
    ) -> Any:
        """
        Invoke a formula the way the host does.

        Parameters are type-checked, the formula runs, and the returned body
        is checked against the declared result schema. A body that does not
        match is logged and still returned unchanged; only the fetch itself
        can fail an invocation.

        Raises:
            ValueError: Unknown formula or invalid parameters
            FetchFailedError: Upstream status other than 200
        """
        tool = self.get(name)
        if tool is None:
            raise ValueError(f"Unknown formula: {name}")

        tool.validate_parameters(parameters)
        body = await tool.execute(parameters, context)

        if validate_result:
            self.check_result(tool.definition, body)

        return body

    def check_result(self, definition: ToolDefinition, body: Any) -> List[str]:
        """Return the schema mismatches in `body`, logging them once."""
        try:
            definition.result_adapter().validate_python(body)
        except ValidationError as e:
            problems = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            logger.warning(
                f"{definition.name} result does not match its schema "
                f"({len(problems)} issue(s)): {'; '.join(problems[:5])}"
            )
            return problems
        return []

    def initialize_default_tools(self) -> None:
        """
        Register all built-in formulas.

        Called once at startup.
        """
        if self._initialized:
            logger.info("Formulas already initialized, skipping")
            return

        logger.info("Initializing default formulas...")

        from avwx_pack.tools.avwx import (
            MetarTool,
            NearestStationsTool,
            StationSearchTool,
            StationTool,
            SummaryTool,
            TafTool,
        )

        for tool_class in (
            SummaryTool,
            StationTool,
            NearestStationsTool,
            StationSearchTool,
            MetarTool,
            TafTool,
        ):
            self.register(tool_class)

        self._initialized = True
        logger.info(f"Initialized {len(self._tools)} formulas")

    def clear(self) -> None:
        """
        Clear all registered formulas.

        Mainly for testing purposes.
        """
        self._tools.clear()
        self._initialized = False
        logger.info("Cleared all registered formulas")


# Global singleton instance
tool_registry = ToolRegistry()
