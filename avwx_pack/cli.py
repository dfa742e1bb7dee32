"""
Command-line runner for the AVWX formulas.

Usage:
    avwx-pack list
    avwx-pack Station KJFK
    avwx-pack NearestStations 40.63 -73.77 5
    avwx-pack StationSearch Denver 3

The token comes from AVWX_TOKEN or the ``avwx.token`` key of --config.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional, Sequence

import structlog
import yaml

from avwx_pack.config import PackConfig, load_config
from avwx_pack.logging_config import setup_logging
from avwx_pack.tools.base import ParameterType, Tool
from avwx_pack.tools.context import ToolExecutionContext
from avwx_pack.tools.http.fetcher import AiohttpFetcher
from avwx_pack.tools.registry import tool_registry

logger = structlog.get_logger(__name__)


def _parse_number(raw: str) -> float | int:
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Expected a number, got {raw!r}")


def coerce_arguments(tool: Tool, raw_args: Sequence[str]) -> Dict[str, Any]:
    """Bind command-line strings to parameters, parsing number parameters."""
    bound = tool.bind_arguments(list(raw_args))
    params = {p.name: p for p in tool.definition.parameters}
    out: Dict[str, Any] = {}
    for name, raw in bound.items():
        ptype = params[name].type
        if ptype == ParameterType.NUMBER:
            out[name] = _parse_number(raw)
        elif ptype == ParameterType.BOOLEAN:
            out[name] = str(raw).strip().lower() in ("1", "true", "yes", "on")
        else:
            out[name] = raw
    return out


def build_fetcher(config: PackConfig) -> AiohttpFetcher:
    return AiohttpFetcher(
        token=config.token,
        allowed_domains=config.network_domains,
        timeout_ms=config.timeout_ms,
        user_agent=config.user_agent,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="avwx-pack", description="Invoke AVWX aviation weather formulas.")
    parser.add_argument("formula", help="Formula name (e.g. Station, Metar) or 'list'")
    parser.add_argument("args", nargs="*", help="Formula arguments in declaration order")
    parser.add_argument("--config", default=None, help="Path to YAML config")
    parser.add_argument("--no-validate", action="store_true", help="Skip result schema validation")
    return parser


async def run(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    # stdout carries JSON only; route config-time warnings to stderr too.
    setup_logging()
    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Cannot load config: {e}", file=sys.stderr)
        return 1
    setup_logging(config.log_level, config.log_format)
    tool_registry.initialize_default_tools()

    if args.formula == "list":
        print(json.dumps(tool_registry.to_manifest(), indent=2, default=str))
        return 0

    tool = tool_registry.get(args.formula)
    if tool is None:
        print(f"Unknown formula: {args.formula}", file=sys.stderr)
        return 1

    try:
        parameters = coerce_arguments(tool, args.args)
        context = ToolExecutionContext(fetcher=build_fetcher(config))
        result = await tool_registry.invoke(
            tool.definition.name,
            parameters,
            context,
            validate_result=not args.no_validate,
        )
    except Exception as e:
        logger.error("Formula invocation failed", formula=args.formula, error=str(e))
        print(str(e), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        return asyncio.run(run(argv))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
