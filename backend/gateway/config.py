"""
Server configuration.
Reads the environment (and an optional .env file) once at startup into an
immutable ServerConfig that is handed to the application factory.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# --- DEFAULTS ---
DEFAULT_PORT = 3000
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_STATIC_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "public"
)
MAX_CONTENT_LENGTH = 20 * 1024 * 1024  # 20MB request bodies


class ConfigError(Exception):
    """Raised when an environment value cannot be used."""
    pass


@dataclass(frozen=True)
class ServerConfig:
    gemini_api_key: Optional[str] = None
    port: int = DEFAULT_PORT
    static_dir: str = DEFAULT_STATIC_DIR
    gemini_model: str = DEFAULT_MODEL
    temperature: float = 0.4
    max_output_tokens: int = 1024
    max_content_length: int = MAX_CONTENT_LENGTH

    @property
    def has_key(self) -> bool:
        return bool(self.gemini_api_key)


def load_config() -> ServerConfig:
    """
    Build a ServerConfig from the process environment.

    Environment:
        GEMINI_API_KEY: Credential for the Gemini API (optional at startup).
        PORT: Listening port, defaults to 3000.
        GEMINI_MODEL: Upstream model name.
        STATIC_DIR: Directory holding the browser client.

    Returns:
        ServerConfig: The frozen configuration.

    Raises:
        ConfigError: If PORT is not a valid port number.
    """
    load_dotenv()

    raw_port = os.getenv("PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigError(f"PORT must be a valid integer, got {raw_port!r}")
    if not 0 < port < 65536:
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}")

    return ServerConfig(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        port=port,
        static_dir=os.getenv("STATIC_DIR") or DEFAULT_STATIC_DIR,
        gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
    )
