"""
Configuration management for PilotBoard.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _parse_timeout(value: str) -> Optional[float]:
    """Parse a timeout in seconds, or None if empty/invalid."""
    if not value:
        return None
    try:
        timeout = float(value.strip())
    except ValueError:
        return None
    return timeout if timeout > 0 else None


@dataclass(frozen=True)
class WhazzupConfig:
    """IVAO whazzup feed configuration."""
    url: str = os.getenv('WHAZZUP_URL', 'https://api.ivao.aero/v2/tracker/whazzup')
    # None keeps the requests default (no timeout override)
    timeout_seconds: Optional[float] = _parse_timeout(os.getenv('WHAZZUP_TIMEOUT_SECONDS', ''))


@dataclass(frozen=True)
class DatabaseConfig:
    """Database configuration."""
    url: str = os.getenv('DATABASE_URL', 'sqlite:///pilot_board.db')

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith('sqlite')


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    whazzup: WhazzupConfig
    database: DatabaseConfig

    # Flask settings
    secret_key: str
    debug: bool


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        whazzup=WhazzupConfig(),
        database=DatabaseConfig(),
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
