"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and match
the behaviour of the service when it is started without any
environment at all: it listens on ``localhost:3000``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Ice Cream Shop REST API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a file that receives a copy of every log record.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Address the uvicorn server binds to.  Only ``run.py`` uses these;
    # when the app is served by an external ASGI server they are ignored
    # except for the startup banner.
    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
