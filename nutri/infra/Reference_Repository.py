import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Union

from nutri.domain.IngredientReference import ReferenceTable
from nutri.infra.paths import INGREDIENTS_DB_FILE, TASTE_PROFILES_FILE

logger = logging.getLogger(__name__)


class ReferenceTableError(RuntimeError):
    """The ingredient reference table could not be loaded."""


def load_reference_table(path: Optional[Union[str, Path]] = None) -> ReferenceTable:
    """Read the ingredient reference table from JSON.

    Unlike the per-request data, a missing or broken table is a deployment
    error, so every failure is raised as ReferenceTableError.
    """
    path = Path(path) if path else INGREDIENTS_DB_FILE
    try:
        with open(path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except FileNotFoundError as e:
        raise ReferenceTableError(f"Reference table not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ReferenceTableError(f"Invalid JSON in reference table {path}: {e}") from e

    if not isinstance(records, list):
        raise ReferenceTableError(f"Reference table {path} must be a JSON array")
    try:
        table = ReferenceTable.from_records(records)
    except (TypeError, ValueError) as e:
        raise ReferenceTableError(f"Invalid reference table {path}: {e}") from e

    logger.info(f"Loaded {len(table)} reference ingredients from {path}")
    return table


@lru_cache(maxsize=None)
def get_reference_table() -> ReferenceTable:
    """Process-wide table, loaded on first use and never reloaded."""
    return load_reference_table()


def load_taste_profiles(path: Optional[Union[str, Path]] = None) -> Dict[str, List[str]]:
    """Read keyword -> taste tags. Missing or invalid data yields an empty profile."""
    path = Path(path) if path else TASTE_PROFILES_FILE
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Taste profiles file not found: {path}. Using empty profiles.")
        return {}
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in taste profiles file: {e}")
        return {}
    if not isinstance(data, dict):
        logger.error(f"Taste profiles file {path} must be a JSON object")
        return {}
    return {
        str(k).lower(): [str(t) for t in v]
        for k, v in data.items() if isinstance(v, list)
    }


@lru_cache(maxsize=None)
def get_taste_profiles() -> Dict[str, List[str]]:
    return load_taste_profiles()


__all__ = [
    'ReferenceTableError', 'load_reference_table', 'get_reference_table',
    'load_taste_profiles', 'get_taste_profiles',
]
