from pathlib import Path

from nutri.utilities.config import REFERENCE_TABLE_OVERRIDE, TASTE_PROFILES_OVERRIDE

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
INGREDIENTS_DB_FILE = Path(REFERENCE_TABLE_OVERRIDE) if REFERENCE_TABLE_OVERRIDE else DATA_DIR / 'ingredients_db.json'
TASTE_PROFILES_FILE = Path(TASTE_PROFILES_OVERRIDE) if TASTE_PROFILES_OVERRIDE else DATA_DIR / 'taste_profiles.json'

__all__ = ['DATA_DIR', 'INGREDIENTS_DB_FILE', 'TASTE_PROFILES_FILE']
