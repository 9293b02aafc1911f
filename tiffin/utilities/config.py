"""Configuration management for the Tiffin Service application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

LOG_LEVELS: Final[tuple[str, ...]] = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

_log_level = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
# Unknown level names fall back to INFO so startup never fails on a typo
LOG_LEVEL: Final[str] = _log_level if _log_level in LOG_LEVELS else 'INFO'
