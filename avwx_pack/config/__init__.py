"""
Runtime configuration for invoking the formulas outside a host.

Sources, lowest precedence first:
- YAML file with ``avwx:`` and ``logging:`` sections (env-expanded)
- Environment: AVWX_TOKEN, AVWX_TIMEOUT_MS, AVWX_USER_AGENT, LOG_LEVEL, LOG_FORMAT
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .loaders import load_yaml_with_env_expansion, resolve_config_path

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_MS = 10000
DEFAULT_USER_AGENT = "avwx-pack/1.0"
DEFAULT_NETWORK_DOMAINS: Tuple[str, ...] = ("avwx.rest",)


class AvwxSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    token: Optional[str] = None
    timeout_ms: Optional[int] = Field(default=None, ge=1)
    user_agent: Optional[str] = None
    network_domains: Optional[List[str]] = None


class LoggingSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Optional[str] = None
    format: Optional[str] = None


class ConfigFile(BaseModel):
    """Schema of config/avwx.yaml; other top-level keys are ignored."""
    model_config = ConfigDict(extra="ignore")

    avwx: AvwxSection = Field(default_factory=AvwxSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)


@dataclass(frozen=True)
class PackConfig:
    token: Optional[str] = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    user_agent: str = DEFAULT_USER_AGENT
    network_domains: Tuple[str, ...] = field(default=DEFAULT_NETWORK_DOMAINS)
    log_level: str = "INFO"
    log_format: str = "console"


def read_config_file(path: str) -> ConfigFile:
    """
    Load and check one config file.

    Raises:
        FileNotFoundError, yaml.YAMLError: Unreadable file
        ValueError: Sections do not match the schema
    """
    resolved = resolve_config_path(path)
    raw = load_yaml_with_env_expansion(resolved)
    # Empty YAML values (e.g. "token:") mean "not set".
    for section in ("avwx", "logging"):
        if section in raw and raw[section] is None:
            raw[section] = {}
    try:
        return ConfigFile.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid config file {resolved}: {e}") from e


def _env_timeout(default: Optional[int]) -> Optional[int]:
    raw = os.getenv("AVWX_TIMEOUT_MS")
    if not raw:
        return default
    try:
        return max(1, int(raw))
    except ValueError:
        logger.warning("Ignoring non-integer AVWX_TIMEOUT_MS", value=raw)
        return default


def load_config(path: Optional[str] = None) -> PackConfig:
    """
    Build a PackConfig from an optional YAML file and the environment.

    A missing token is only a warning: AVWX answers 401, which surfaces as
    the generic fetch failure.
    """
    file_cfg = read_config_file(path) if path else ConfigFile()
    avwx = file_cfg.avwx
    log_cfg = file_cfg.logging

    token = (os.getenv("AVWX_TOKEN") or avwx.token or "").strip() or None
    user_agent = (os.getenv("AVWX_USER_AGENT") or avwx.user_agent or DEFAULT_USER_AGENT).strip()
    domains = tuple(d.strip().lower() for d in (avwx.network_domains or ()) if d.strip())

    if not token:
        logger.warning("AVWX_TOKEN not configured; requests will be unauthenticated")

    return PackConfig(
        token=token,
        timeout_ms=_env_timeout(avwx.timeout_ms) or DEFAULT_TIMEOUT_MS,
        user_agent=user_agent,
        network_domains=domains or DEFAULT_NETWORK_DOMAINS,
        log_level=(os.getenv("LOG_LEVEL") or log_cfg.level or "INFO").upper(),
        log_format=(os.getenv("LOG_FORMAT") or log_cfg.format or "console").lower(),
    )


__all__ = ["ConfigFile", "PackConfig", "load_config", "read_config_file"]
