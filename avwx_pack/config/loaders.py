"""
Reading the pack's YAML config file.

`${VAR}` and `${VAR:-default}` references are substituted from the
environment before the YAML is parsed.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict

import yaml

# Repository root; relative config paths are taken from here.
PROJECT_ROOT = Path(__file__).resolve().parents[2]

_ENV_REF = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::[-=](?P<default>[^}]*))?\}")


def expand_env(text: str) -> str:
    """
    Substitute environment references in raw config text.

    `${VAR:-default}` (or `:=`) falls back to the default when VAR is unset
    or empty. A bare `${VAR}` that is unset stays as written.
    """
    def _sub(match: "re.Match[str]") -> str:
        value = os.environ.get(match.group("name"))
        default = match.group("default")
        if default is not None:
            return value or default
        return match.group(0) if value is None else value

    return _ENV_REF.sub(_sub, text)


def resolve_config_path(path: str) -> str:
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = PROJECT_ROOT / candidate
    return str(candidate)


def load_yaml_with_env_expansion(path: str) -> Dict[str, Any]:
    """
    Parse a YAML config file after env expansion.

    Raises:
        FileNotFoundError: No file at `path`
        yaml.YAMLError: The file is not valid YAML
        ValueError: The top level is not a mapping
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(expand_env(f.read()))

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data
