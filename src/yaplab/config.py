"""
Client Configuration

Settings for the YapLab client, read from environment variables with
defaults suitable for a backend running on localhost.

    YAPLAB_API_URL       Backend root URL (default http://localhost:8080)
    YAPLAB_TIMEOUT       Request timeout in seconds (default 10)
    YAPLAB_SESSION_FILE  Session store path (default ~/.yaplab/session.json)
    YAPLAB_LOG_FILE      Log file path (default yaplab_client.log)
    YAPLAB_LOG_LEVEL     Logging level name (default WARNING)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0
DEFAULT_SESSION_FILE = "~/.yaplab/session.json"
DEFAULT_LOG_FILE = "yaplab_client.log"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class ClientConfig:
    """Runtime settings for the client."""

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    session_file: str = DEFAULT_SESSION_FILE
    log_file: str = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ValueError: If YAPLAB_TIMEOUT is not a positive number
        """
        env = os.environ if environ is None else environ

        timeout_env = env.get("YAPLAB_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout_env)
        except ValueError:
            raise ValueError(f"YAPLAB_TIMEOUT must be a number, got {timeout_env!r}")
        if timeout <= 0:
            raise ValueError(f"YAPLAB_TIMEOUT must be positive, got {timeout}")

        return cls(
            api_url=env.get("YAPLAB_API_URL", DEFAULT_API_URL),
            timeout=timeout,
            session_file=env.get("YAPLAB_SESSION_FILE", DEFAULT_SESSION_FILE),
            log_file=env.get("YAPLAB_LOG_FILE", DEFAULT_LOG_FILE),
            log_level=env.get("YAPLAB_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
