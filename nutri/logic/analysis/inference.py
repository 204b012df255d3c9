"""Keyword inference over ingredient names: allergens, diets, taste, advice."""
import re
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from nutri.utilities.constants import (
    ALLERGEN_KEYWORDS,
    HIGH_CALORIES_PER_SERVING,
    HIGH_SODIUM_PER_SERVING,
    LOW_PROTEIN_PER_SERVING,
)

_ANIMAL_RE = re.compile(r"meat|chicken|beef|pork|bacon|fish|salmon|tuna|shrimp|prawn")
_ANIMAL_PRODUCT_RE = re.compile(r"\beggs?\b|cheese|milk|butter|yogurt|cream|honey")
_GLUTEN_RE = re.compile(r"wheat|flour|bread|pasta|gluten|noodle|spaghetti")


def _item_text(items: Iterable[Any]) -> str:
    names = []
    for it in items or []:
        name = it.get("item", "") if isinstance(it, dict) else getattr(it, "item", it)
        if isinstance(name, str):
            names.append(name.lower())
    return " ".join(names)


def detect_allergens(items: Iterable[Any]) -> List[str]:
    '''Allergen groups whose keywords appear in any ingredient name.'''
    text = _item_text(items)
    return [group for group, keys in ALLERGEN_KEYWORDS.items() if any(k in text for k in keys)]


def infer_diets(items: Iterable[Any]) -> List[str]:
    text = _item_text(items)
    diets: List[str] = []
    if not _ANIMAL_RE.search(text) and not _ANIMAL_PRODUCT_RE.search(text):
        diets.append("vegan")
    if not _ANIMAL_RE.search(text):
        diets.append("vegetarian")
    if not _GLUTEN_RE.search(text):
        diets.append("gluten_free")
    return diets


def taste_profile(items: Iterable[Any], profiles: Mapping[str, Sequence[str]]) -> List[str]:
    """Unique taste tags, in first-seen order, for every profile key found in an item."""
    tags: List[str] = []
    for it in items or []:
        name = it.get("item", "") if isinstance(it, dict) else getattr(it, "item", it)
        if not isinstance(name, str):
            continue
        name = name.lower()
        for key, key_tags in profiles.items():
            if key.lower() in name:
                for tag in key_tags:
                    if tag not in tags:
                        tags.append(tag)
    return tags


def generate_summary(title: str, servings: int, ingredient_count: int, diets: Sequence[str]) -> str:
    parts = [f'"{title}"' if title else "Recipe"]
    if servings:
        parts.append(f"serves {servings}")
    if ingredient_count:
        parts.append(f"{ingredient_count} ingredients")
    summary = " - ".join(parts) + "."
    if diets:
        summary += " Fits: " + ", ".join(d.replace("_", " ") for d in diets) + "."
    return summary


def generate_suggestions(per_serving: Mapping[str, float], taste: Sequence[str]) -> List[str]:
    s: List[str] = []
    if (per_serving.get("calories") or 0) > HIGH_CALORIES_PER_SERVING:
        s.append("High calories per serving: consider smaller portions.")
    if (per_serving.get("sodium") or 0) > HIGH_SODIUM_PER_SERVING:
        s.append("High sodium: reduce salt or processed ingredients.")
    if (per_serving.get("protein") or 0) < LOW_PROTEIN_PER_SERVING:
        s.append("Add protein sources like beans, yogurt, or nuts.")
    if "spicy" in taste and "cooling" not in taste:
        s.append("Balance spice with yogurt or cucumber.")
    return s


__all__ = [
    "detect_allergens", "infer_diets", "taste_profile",
    "generate_summary", "generate_suggestions",
]
