"""
Settings Module for Creative Analysis

Environment-driven configuration with safe defaults.

Usage:
    from config.settings import Settings, get_settings

    settings = get_settings()
    st.number_input("Target CPL", value=settings.target_cpl)

    # Or read a single value directly:
    currency = Settings.get_str('CREATIVE_CURRENCY_SYMBOL')
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Project root .env (config/ -> project root)
load_dotenv(Path(__file__).parent.parent / '.env')


@dataclass(frozen=True)
class AppSettings:
    target_cpl: float
    currency_symbol: str
    min_days_active: int
    log_level: str


class Settings:
    """
    Centralized settings lookup.

    Reads values from environment variables, falling back to DEFAULTS
    when a variable is unset or cannot be parsed.
    """

    DEFAULTS: Dict[str, Any] = {
        'CREATIVE_TARGET_CPL': 300.0,         # Baseline CPL for recommendations
        'CREATIVE_CURRENCY_SYMBOL': '฿',
        'CREATIVE_MIN_DAYS_ACTIVE': 4,        # Learning phase threshold
        'CREATIVE_LOG_LEVEL': 'INFO',
    }

    @staticmethod
    def get_str(name: str) -> str:
        value = os.getenv(name)
        if value is None or not value.strip():
            return str(Settings.DEFAULTS.get(name, ''))
        return value.strip()

    @staticmethod
    def get_float(name: str) -> float:
        """
        Read a float setting.

        Args:
            name: Environment variable name (e.g., 'CREATIVE_TARGET_CPL')

        Returns:
            Parsed value, or the default if unset, unparseable or negative
        """
        default = float(Settings.DEFAULTS.get(name, 0.0))
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid value for {name}: {raw!r}, using default {default}")
            return default
        if value < 0:
            logger.warning(f"Negative value for {name}: {raw!r}, using default {default}")
            return default
        return value

    @staticmethod
    def get_int(name: str) -> int:
        default = int(Settings.DEFAULTS.get(name, 0))
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid value for {name}: {raw!r}, using default {default}")
            return default
        if value < 0:
            logger.warning(f"Negative value for {name}: {raw!r}, using default {default}")
            return default
        return value

    @staticmethod
    def load() -> AppSettings:
        """Build a fresh snapshot of all settings from the environment."""
        log_level = Settings.get_str('CREATIVE_LOG_LEVEL').upper()
        if log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            logger.warning(f"Unknown log level {log_level!r}, using INFO")
            log_level = 'INFO'

        return AppSettings(
            target_cpl=Settings.get_float('CREATIVE_TARGET_CPL'),
            currency_symbol=Settings.get_str('CREATIVE_CURRENCY_SYMBOL'),
            min_days_active=Settings.get_int('CREATIVE_MIN_DAYS_ACTIVE'),
            log_level=log_level,
        )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Cached settings for the running app. Tests should call Settings.load()."""
    return Settings.load()


def configure_logging(level: str = None):
    """Configure root logging once at app start."""
    level = level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
