from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_GRAPHQL_PATH = "/graphql"
DEFAULT_LOG_LEVEL = 1

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    graphql_path: str = DEFAULT_GRAPHQL_PATH
    seed_sample_todos: bool = True
    log_level: int = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None


def _parse_int(env: Mapping[str, str], name: str, default: int, minimum: int, maximum: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid {name} value: {raw}. Error: {e}. Using default: {default}")
        return default
    if value < minimum or value > maximum:
        logger.warning(
            f"{name} value {value} is outside {minimum}-{maximum}. Using default: {default}"
        )
        return default
    return value


def _parse_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    logger.warning(f"Invalid {name} value: {raw}. Using default: {default}")
    return default


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read service settings from the environment, falling back to defaults."""
    env = os.environ if env is None else env

    graphql_path = env.get("GRAPHQL_PATH") or DEFAULT_GRAPHQL_PATH
    if not graphql_path.startswith("/"):
        logger.warning(
            f"Invalid GRAPHQL_PATH value: {graphql_path}. Must start with '/'. "
            f"Using default: {DEFAULT_GRAPHQL_PATH}"
        )
        graphql_path = DEFAULT_GRAPHQL_PATH

    return Settings(
        host=env.get("HOST") or DEFAULT_HOST,
        port=_parse_int(env, "PORT", DEFAULT_PORT, 1, 65535),
        graphql_path=graphql_path,
        seed_sample_todos=_parse_bool(env, "SEED_SAMPLE_TODOS", True),
        log_level=_parse_int(env, "LOG_LEVEL", DEFAULT_LOG_LEVEL, 0, 2),
        log_file=env.get("LOG_FILE") or None,
    )
