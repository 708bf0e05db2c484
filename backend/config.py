"""
Webhook configuration.

Everything is read once from the environment at process start (main loads a
.env file first) and handed to create_app() as a frozen value:

  WEBHOOK_HOST        bind address             (default 0.0.0.0)
  WEBHOOK_PORT        bind port                (default 80)
  WEBHOOK_DATA_PATH   root of the metric files (default ./data)
  WEBHOOK_API_KEY     shared bearer secret     (empty = no authentication)
  WEBHOOK_LOG_LEVEL   error | warn | info | debug
  WEBHOOK_LOG_FORMAT  json for structured logs, anything else for text
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 80
DEFAULT_DATA_PATH = "data"

_LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    data_path: Path = Path(DEFAULT_DATA_PATH)
    api_key: str = ""               # empty disables authentication
    log_level: int = logging.INFO
    log_json: bool = False

    @property
    def requires_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("WEBHOOK_HOST", DEFAULT_HOST).strip(),
            port=_parse_port(env.get("WEBHOOK_PORT")),
            data_path=Path(env.get("WEBHOOK_DATA_PATH", DEFAULT_DATA_PATH).strip()),
            api_key=env.get("WEBHOOK_API_KEY", "").strip(),
            log_level=_LOG_LEVELS.get(env.get("WEBHOOK_LOG_LEVEL", "").lower(), logging.INFO),
            log_json=env.get("WEBHOOK_LOG_FORMAT", "").lower() == "json",
        )


def _parse_port(raw: Optional[str]) -> int:
    # Unparseable or zero ports fall back to the default instead of failing startup
    try:
        port = int(raw) if raw is not None else 0
    except ValueError:
        return DEFAULT_PORT
    return port or DEFAULT_PORT
