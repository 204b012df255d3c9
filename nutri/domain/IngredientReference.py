"""Ingredient reference table: canonical ingredients with per-100g nutrient profiles.

Entries are NamedTuples and the table keeps them in a tuple, so both are
read-only once built and can be shared between concurrent estimations.
"""
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from nutri.utilities.constants import NUTRIENT_KEYS


class IngredientReferenceEntry(NamedTuple):
    name: str
    aliases: Tuple[str, ...] = ()
    # per 100 g; None means "not listed" and counts as 0 in aggregation
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    sodium: Optional[float] = None
    sugars: Optional[float] = None
    fiber: Optional[float] = None
    potassium: Optional[float] = None
    iron: Optional[float] = None
    calcium: Optional[float] = None
    vitaminD: Optional[float] = None

    def nutrient(self, key: str) -> float:
        """Per-100g amount for a nutrient key, 0 when absent."""
        value = getattr(self, key, None)
        return value or 0.0

    @staticmethod
    def from_dict(data: Dict) -> "IngredientReferenceEntry":
        '''Build an entry from one record of the reference data. Ignores unknown keys.'''
        if not isinstance(data, dict):
            raise ValueError(f"Reference record must be an object, got {type(data).__name__}")
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Reference record without a name: {data!r}")
        aliases = tuple(
            a.strip().lower() for a in (data.get("aliases") or [])
            if isinstance(a, str) and a.strip()
        )
        values = {}
        for key in NUTRIENT_KEYS:
            raw = data.get(key)
            if raw is None:
                continue
            value = float(raw)
            if value < 0:
                raise ValueError(f"Negative {key} for {name!r}: {raw}")
            values[key] = value
        return IngredientReferenceEntry(name=name.strip().lower(), aliases=aliases, **values)

    def to_dict(self) -> Dict:
        d = {"name": self.name, "aliases": list(self.aliases)}
        for key in NUTRIENT_KEYS:
            d[key] = getattr(self, key)
        return d


class ReferenceTable:
    """Ordered, immutable collection of reference entries.

    Iteration order is the order of the source data; the matcher relies on
    it to pick the first structural match.
    """

    def __init__(self, entries: Iterable[IngredientReferenceEntry]):
        items = tuple(entries)
        index: Dict[str, IngredientReferenceEntry] = {}
        for entry in items:
            if entry.name in index:
                raise ValueError(f"Duplicate reference ingredient: {entry.name!r}")
            index[entry.name] = entry
        self._entries = items
        self._by_name: Mapping[str, IngredientReferenceEntry] = MappingProxyType(index)

    def __iter__(self) -> Iterator[IngredientReferenceEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[IngredientReferenceEntry]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [e.name for e in self._entries]

    @classmethod
    def from_records(cls, records: Iterable[Dict]) -> "ReferenceTable":
        return cls(IngredientReferenceEntry.from_dict(r) for r in records)

    def __repr__(self) -> str:
        return f"ReferenceTable({len(self._entries)} ingredients)"


__all__ = ["IngredientReferenceEntry", "ReferenceTable"]
