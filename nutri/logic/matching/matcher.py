"""Resolve free-text ingredient names against the reference table.

Exact name first, then the first entry (in table order) whose name or one of
whose aliases appears inside the query. There is no scoring: when several
entries could match, table order decides.
"""
import logging
from typing import Optional

from nutri.domain.IngredientReference import IngredientReferenceEntry, ReferenceTable

logger = logging.getLogger(__name__)


def normalize_name(name: Optional[str]) -> str:
    return (name or "").strip().lower()


class IngredientMatcher:
    def __init__(self, table: ReferenceTable):
        self.table = table

    def match(self, name: Optional[str]) -> Optional[IngredientReferenceEntry]:
        q = normalize_name(name)
        if not q:
            return None
        exact = self.table.get(q)
        if exact is not None:
            return exact
        for entry in self.table:
            if entry.name in q or any(alias in q for alias in entry.aliases):
                return entry
        logger.debug("No reference ingredient for %r", q)
        return None


__all__ = ["IngredientMatcher", "normalize_name"]
