"""
Runtime configuration for the Bookmark Preview Cloud Functions.

Values are read from the environment once, when a function module is loaded,
and handed to the handlers explicitly.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MODEL = 'gemini-2.0-flash'
DEFAULT_FETCH_TIMEOUT = 30
PRODUCTION = 'production'


@dataclass(frozen=True)
class FunctionConfig:
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL
    fetch_timeout: int = DEFAULT_FETCH_TIMEOUT
    app_env: str = PRODUCTION
    log_level: str = 'INFO'

    @property
    def has_completion_credential(self) -> bool:
        return bool(self.gemini_api_key)

    @property
    def is_production(self) -> bool:
        return self.app_env == PRODUCTION


def _int_from_env(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default
    return value if value > 0 else default


def load_config() -> FunctionConfig:
    """Build the configuration from environment variables."""
    api_key = (os.environ.get('GEMINI_API_KEY') or '').strip()
    return FunctionConfig(
        gemini_api_key=api_key or None,
        gemini_model=os.environ.get('GEMINI_MODEL') or DEFAULT_MODEL,
        fetch_timeout=_int_from_env('FETCH_TIMEOUT', DEFAULT_FETCH_TIMEOUT),
        app_env=(os.environ.get('APP_ENV') or PRODUCTION).strip().lower(),
        log_level=(os.environ.get('LOG_LEVEL') or 'INFO').strip().upper(),
    )


def configure_logging(config: FunctionConfig) -> None:
    level = getattr(logging, config.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
