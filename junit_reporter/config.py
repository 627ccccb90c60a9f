"""Configuration loading for junit-reporter."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "markdown"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30
DEFAULT_MCP_PORT = 8978

CONFIG_KEYS = ['DEFAULT_FORMAT', 'HTTP_TIMEOUT_SECONDS', 'FASTMCP_PORT']


def load_config() -> dict:
    """Load config from environment variables and .env file.

    Environment variables take precedence over .env file values.
    """
    paths = [
        os.environ.get('JUNIT_REPORTER_CONFIG'),
        Path.cwd() / '.env',
        Path(__file__).parent.parent / '.env',
    ]
    config = {}
    for p in paths:
        if p and Path(p).exists():
            try:
                for line in Path(p).read_text().splitlines():
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        key, value = line.split('=', 1)
                        config[key.strip()] = value.strip()
                break
            except OSError as e:
                logger.warning(f"Failed to read config file {p}: {e}")

    for key in CONFIG_KEYS:
        env_value = os.environ.get(key)
        if env_value is not None:
            config[key] = env_value

    return config


def _get_int(key: str, default: int) -> int:
    value = load_config().get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {key}={value!r}, using {default}")
        return default


def get_default_format() -> str:
    return load_config().get('DEFAULT_FORMAT', DEFAULT_FORMAT)


def get_http_timeout() -> int:
    return _get_int('HTTP_TIMEOUT_SECONDS', DEFAULT_HTTP_TIMEOUT_SECONDS)


def get_mcp_port() -> int:
    return _get_int('FASTMCP_PORT', DEFAULT_MCP_PORT)
