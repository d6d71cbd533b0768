from typing import Mapping, Optional
import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def parse_port(raw: Optional[str]) -> int:
    """
    Turn the PORT value into a TCP port.
    Unset, empty, non-numeric or out-of-range values give DEFAULT_PORT.
    """
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring unparseable PORT={raw!r}, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning(f"Ignoring out-of-range PORT={port}, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    return port


def parse_log_level(raw: Optional[str]) -> str:
    level = (raw or "").strip().upper()
    if not level:
        return DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Unknown LOG_LEVEL={raw!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def config_from_env(env: Mapping[str, str]) -> ServerConfig:
    return ServerConfig(
        port=parse_port(env.get("PORT")),
        log_level=parse_log_level(env.get("LOG_LEVEL")),
    )


def load_config() -> ServerConfig:
    # .env never overrides variables already exported in the shell
    load_dotenv(find_dotenv(usecwd=True))
    return config_from_env(os.environ)
