"""Configuration management for the nutrition estimator."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Data file overrides (defaults live in nutri.infra.paths)
REFERENCE_TABLE_OVERRIDE: Final[Optional[str]] = os.getenv('NUTRI_REFERENCE_TABLE') or None
TASTE_PROFILES_OVERRIDE: Final[Optional[str]] = os.getenv('NUTRI_TASTE_PROFILES') or None

# Diagnostics ring buffer size
MAX_EVENTS: Final[int] = int(os.getenv('MAX_EVENTS', '300'))
