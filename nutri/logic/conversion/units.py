"""Unit conversion: (quantity, unit, ingredient) -> grams.

Weight units convert directly. Volume units go through milliliters and an
approximate density picked from the ingredient name by an ordered rule
table. Units found in neither table are taken to be grams already, which
keeps noisy free-text recipes usable.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

# Common cooking unit conversions (approximate)
WEIGHT_TO_G: Mapping[str, float] = MappingProxyType({
    "g": 1, "gram": 1, "grams": 1, "gr": 1,
    "kg": 1000, "kilogram": 1000, "kilograms": 1000, "kgs": 1000,
    "mg": 0.001, "milligram": 0.001, "milligrams": 0.001,
    "lb": 453.592, "lbs": 453.592, "pound": 453.592, "pounds": 453.592,
    "oz": 28.3495, "ounce": 28.3495, "ounces": 28.3495,
})

VOLUME_TO_ML: Mapping[str, float] = MappingProxyType({
    "ml": 1, "milliliter": 1, "milliliters": 1, "millilitre": 1, "millilitres": 1,
    "tsp": 4.93, "tsps": 4.93, "teaspoon": 4.93, "teaspoons": 4.93,
    "tbsp": 14.79, "tbsps": 14.79, "tablespoon": 14.79, "tablespoons": 14.79,
    "cup": 236.59, "cups": 236.59,
    "fl oz": 29.57,
    "pint": 473.18, "pints": 473.18,
    "quart": 946.35, "quarts": 946.35,
    "liter": 1000, "liters": 1000, "litre": 1000, "litres": 1000, "l": 1000,
})

# approximate densities (g/ml) for common ingredients when given in volume
DENSITY: Mapping[str, float] = MappingProxyType({
    "water": 1, "milk": 1.03, "oil": 0.91, "olive_oil": 0.91,
    "flour": 0.53, "sugar": 0.85, "rice": 0.85,
    "default": 0.8,
})

# (substring of ingredient name, density key), first hit wins
DENSITY_RULES: Tuple[Tuple[str, str], ...] = (
    ("oil", "olive_oil"),
    ("milk", "milk"),
    ("sugar", "sugar"),
    ("flour", "flour"),
    ("rice", "rice"),
)

DEFAULT_DENSITY_KEY = "default"


def normalize_unit(unit: Optional[str]) -> str:
    return (unit or "").strip().lower()


class UnitConverter:
    def __init__(self, weight_to_g: Mapping[str, float] = WEIGHT_TO_G,
                 volume_to_ml: Mapping[str, float] = VOLUME_TO_ML,
                 density: Mapping[str, float] = DENSITY,
                 density_rules: Sequence[Tuple[str, str]] = DENSITY_RULES):
        self.weight_to_g = weight_to_g
        self.volume_to_ml = volume_to_ml
        self.density = density
        self.density_rules = tuple(density_rules)

    def is_known_unit(self, unit: Optional[str]) -> bool:
        u = normalize_unit(unit)
        return u in self.weight_to_g or u in self.volume_to_ml

    def resolve_density_key(self, ingredient_name: Optional[str]) -> str:
        '''Density category for an ingredient, by the first matching rule.'''
        name = (ingredient_name or "").lower()
        for needle, key in self.density_rules:
            if needle in name:
                return key
        return DEFAULT_DENSITY_KEY

    def density_for(self, ingredient_name: Optional[str]) -> float:
        key = self.resolve_density_key(ingredient_name)
        return self.density.get(key, self.density[DEFAULT_DENSITY_KEY])

    def resolve_grams(self, qty: float, unit: Optional[str],
                      ingredient_name: Optional[str] = None) -> Optional[float]:
        '''Grams for a recognized weight or volume unit, None for anything else.'''
        u = normalize_unit(unit)
        if u in self.weight_to_g:
            return qty * self.weight_to_g[u]
        if u in self.volume_to_ml:
            ml = qty * self.volume_to_ml[u]
            return ml * self.density_for(ingredient_name)
        return None

    def to_grams(self, qty: float, unit: Optional[str], ingredient_name: Optional[str] = None) -> float:
        '''Convert to grams; an unknown unit leaves qty unchanged (treated as grams).'''
        grams = self.resolve_grams(qty, unit, ingredient_name)
        return qty if grams is None else grams


DEFAULT_CONVERTER = UnitConverter()


def convert_to_grams(qty: float, unit: Optional[str], ingredient_name: Optional[str] = None) -> float:
    """Shortcut over the default converter tables."""
    return DEFAULT_CONVERTER.to_grams(qty, unit, ingredient_name)


__all__ = [
    "WEIGHT_TO_G", "VOLUME_TO_ML", "DENSITY", "DENSITY_RULES", "DEFAULT_DENSITY_KEY",
    "UnitConverter", "DEFAULT_CONVERTER", "convert_to_grams", "normalize_unit",
]
