"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts with no environment at all and binds to
``127.0.0.1:3000``.  Tests build their own ``Settings`` instances and
pass them to ``create_app`` instead of mutating the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .logging_config import normalize_log_level


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Product Server"
    api_version: str = "1.0.0"
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = ""

    # Directory served under ``/static/``.  A relative path is resolved
    # against the ``product_server`` package directory by
    # ``resolve_public_dir``.
    public_dir: str = "public"

    # Upper bound for buffered POST/PATCH bodies.  Larger bodies are
    # rejected with 413 before they are decoded.
    max_body_bytes: int = 1024 * 1024

    def __post_init__(self) -> None:
        self.log_level = normalize_log_level(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        return cls(
            project_name=env.get("PROJECT_NAME", cls.project_name),
            api_version=env.get("API_VERSION", cls.api_version),
            host=env.get("HOST", cls.host),
            port=int(env.get("PORT", str(cls.port))),
            log_level=env.get("LOG_LEVEL", cls.log_level),
            log_file=env.get("LOG_FILE", cls.log_file),
            public_dir=env.get("PUBLIC_DIR", cls.public_dir),
            max_body_bytes=int(env.get("MAX_BODY_BYTES", str(cls.max_body_bytes))),
        )


def resolve_public_dir(app_settings: Settings) -> Path:
    """Compute the absolute path of the static files directory.

    If ``public_dir`` is an absolute path, use it directly.  Otherwise
    resolve it relative to the package root.
    """
    public_dir = app_settings.public_dir
    if os.path.isabs(public_dir):
        return Path(public_dir).resolve()
    base_dir = Path(__file__).resolve().parent.parent.parent  # product_server/
    return (base_dir / public_dir).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings.from_env()
