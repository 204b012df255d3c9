"""Nutrient totals accumulator used by a single estimation call."""
import math
from typing import Dict, Optional

from nutri.utilities.constants import NUTRIENT_KEYS


def round_half_away(value: float, digits: int = 1) -> float:
    '''Round to `digits` decimals, halves away from zero (2.25 -> 2.3, -2.25 -> -2.3).'''
    factor = 10 ** digits
    scaled = abs(value) * factor
    if not math.isfinite(scaled):
        return value
    # absorb binary noise just below a half (x.x4999999...)
    rounded = math.floor(scaled + 0.5 + 1e-9)
    return math.copysign(rounded / factor, value) if rounded else 0.0


class NutrientTotals:
    def __init__(self, values: Optional[Dict[str, float]] = None):
        v = values or {}
        for key in NUTRIENT_KEYS:
            setattr(self, key, float(v.get(key, 0.0) or 0.0))

    def add(self, entry, multiplier: float) -> bool:
        '''Add a reference entry scaled by multiplier (grams / 100).

        Returns False, leaving the totals untouched, when the entry is None or
        any resulting total would not be finite.
        '''
        if entry is None or not math.isfinite(multiplier):
            return False
        updated = {key: getattr(self, key) + entry.nutrient(key) * multiplier for key in NUTRIENT_KEYS}
        if not all(math.isfinite(v) for v in updated.values()):
            return False
        for key, value in updated.items():
            setattr(self, key, value)
        return True

    def per_serving(self, servings) -> "NutrientTotals":
        '''Divide by max(1, servings) and round every value to one decimal.'''
        try:
            divisor = max(1.0, float(servings or 1))
        except (TypeError, ValueError):
            divisor = 1.0
        if not math.isfinite(divisor):
            divisor = 1.0
        return NutrientTotals({
            key: round_half_away(getattr(self, key) / divisor) for key in NUTRIENT_KEYS
        })

    def to_dict(self) -> Dict[str, float]:
        return {key: getattr(self, key) for key in NUTRIENT_KEYS}

    def __eq__(self, other) -> bool:
        if not isinstance(other, NutrientTotals):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return ", ".join(f"{k}: {v:g}" for k, v in self.to_dict().items())

    __repr__ = __str__
