"""Server configuration constants."""

import os

from hookline.exceptions import ConfigurationError

# Server Configuration
DEFAULT_API_PORT = 8000  # Default port for FastAPI backend
API_PORT_ENV_VAR = "HOOKLINE_API_PORT"


def api_port() -> int:
    """Port for the web server: ``HOOKLINE_API_PORT`` when set, else the default.

    Raises:
        ConfigurationError: If the variable is not a valid TCP port
    """
    raw = os.getenv(API_PORT_ENV_VAR)
    if not raw:
        return DEFAULT_API_PORT
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{API_PORT_ENV_VAR} must be an integer, got {raw!r}") from e
    if not 0 < port < 65536:
        raise ConfigurationError(f"{API_PORT_ENV_VAR} out of range: {port}")
    return port
