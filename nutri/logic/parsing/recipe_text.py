"""Plain-text recipe parsing.

Provides parse_recipe_text(text) for a whole pasted recipe (title, servings,
ingredient strings, steps) and parse_ingredient_line(s) for one ingredient
string such as "1 1/2 cups flour" -> RecipeLine(1.5, "cups", "flour").
"""
import math
import re
from typing import Any, Dict, List, Optional

from nutri.domain.RecipeLine import RecipeLine

_VULGAR_FRACTIONS = {
    "½": 1 / 2, "⅓": 1 / 3, "⅔": 2 / 3, "¼": 1 / 4, "¾": 3 / 4,
    "⅛": 1 / 8, "⅜": 3 / 8, "⅝": 5 / 8, "⅞": 7 / 8,
}
_VF = "".join(_VULGAR_FRACTIONS)

_QTY = (
    rf"\d+\s+\d+/\d+"               # 1 1/2
    rf"|\d+/\d+"                    # 3/4
    rf"|\d+(?:\.\d+)?\s*[{_VF}]"    # 1½
    rf"|\d+(?:\.\d+)?"              # 2, 0.5
    rf"|[{_VF}]"                    # ½
)
_UNIT = (
    r"fl\.?\s*oz|cups?|tbsps?|tablespoons?|tsps?|teaspoons?"
    r"|kgs?|kilograms?|grams?|g|mg|ml|milliliters?|millilitres?|liters?|litres?|l"
    r"|oz|ounces?|lbs?|pounds?|pints?|quarts?|pcs?"
)
INGREDIENT_RE = re.compile(
    rf"^\s*(?:(?P<qty>{_QTY})\s*(?:(?P<unit>{_UNIT})\.?(?=\s|$))?)?\s*(?P<item>.*)$",
    re.IGNORECASE,
)

SERVINGS_RE = re.compile(r"serv(?:es|ings?)\s*[:\-]?\s*(\d+)|makes\s+(\d+)", re.IGNORECASE)
INGREDIENTS_HEADER_RE = re.compile(r"^\s*ingredients?\s*:?\s*$", re.IGNORECASE)
STEPS_HEADER_RE = re.compile(r"^\s*(?:instructions?|steps?|directions?|method)\s*:?\s*$", re.IGNORECASE)
UNIT_WORD_RE = re.compile(r"\b(?:cups?|tsp|tbsp|oz|lb|g|kg|ml|l)\b", re.IGNORECASE)
BULLET_RE = re.compile(r"^[-*•]\s*")
NUMBERED_STEP_RE = re.compile(r"^\d+[\).]\s+")


def _quantity_value(text: Optional[str]) -> Optional[float]:
    """Numeric value of a quantity token, or None when it is not one."""
    if not text:
        return None
    t = text.strip()
    if not t:
        return None
    if t[-1] in _VULGAR_FRACTIONS:
        whole = t[:-1].strip()
        try:
            return (float(whole) if whole else 0.0) + _VULGAR_FRACTIONS[t[-1]]
        except ValueError:
            return None
    parts = t.split()
    if len(parts) == 2:
        whole, frac = parts
        num = _quantity_value(frac)
        try:
            return float(whole) + num if num is not None else None
        except ValueError:
            return None
    if "/" in t:
        n, _, d = t.partition("/")
        try:
            return float(n) / float(d) if float(d) else None
        except ValueError:
            return None
    try:
        return float(t)
    except ValueError:
        return None


def parse_quantity(text: Optional[str]) -> Optional[float]:
    """Finite value of a quantity token. None for malformed ("1/2/3") or overflowing input."""
    value = _quantity_value(text)
    return value if value is not None and math.isfinite(value) else None


def _normalize_unit(unit: Optional[str]) -> str:
    u = (unit or "").strip().lower().rstrip(".")
    if u.startswith("fl"):
        return "fl oz"
    return u


def parse_ingredient_line(s: str) -> RecipeLine:
    """Split one ingredient string into quantity, unit and item.

    A unit is only taken when it directly follows a quantity and ends at a
    word boundary ("2 large eggs" keeps "large eggs" as the item).
    """
    text = BULLET_RE.sub("", (s or "").strip())
    m = INGREDIENT_RE.match(text)
    if not m:
        return RecipeLine(None, "", text)
    item = re.sub(r"^of\s+", "", (m.group("item") or "").strip(), flags=re.IGNORECASE)
    return RecipeLine(
        qty=parse_quantity(m.group("qty")),
        unit=_normalize_unit(m.group("unit")),
        item=item or text,
    )


class ParsedRecipe:
    def __init__(self, title: str = "Untitled", servings: int = 1,
                 ingredients: Optional[List[str]] = None, steps: Optional[List[str]] = None):
        self.title = title
        self.servings = servings
        self.ingredients = ingredients[:] if ingredients else []
        self.steps = steps[:] if steps else []

    def ingredient_lines(self) -> List[RecipeLine]:
        return [parse_ingredient_line(s) for s in self.ingredients]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "servings": self.servings,
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
        }


def _looks_like_ingredient(line: str) -> bool:
    return bool(line[0].isdigit() or UNIT_WORD_RE.search(line) or BULLET_RE.match(line))


def parse_recipe_text(text: str) -> ParsedRecipe:
    """Split pasted recipe text into title, servings, ingredients and steps.

    Sections are switched by "Ingredients:" / "Instructions:" style headers.
    Outside a section, numbered lines are steps and lines with a leading
    number, a cooking unit or a bullet are ingredients.
    """
    lines = [ln.strip() for ln in (text or "").replace("\r", "").split("\n")]
    non_empty = [ln for ln in lines if ln]

    title = "Untitled"
    if non_empty and not (INGREDIENTS_HEADER_RE.match(non_empty[0]) or STEPS_HEADER_RE.match(non_empty[0])):
        title = non_empty[0]
        non_empty = non_empty[1:]

    servings = 1
    m = SERVINGS_RE.search(title)
    if m:
        servings = int(m.group(1) or m.group(2))

    ingredients: List[str] = []
    steps: List[str] = []
    section = "unknown"

    for line in non_empty:
        m = SERVINGS_RE.search(line)
        if m:
            servings = int(m.group(1) or m.group(2))
            continue

        if INGREDIENTS_HEADER_RE.match(line):
            section = "ingredients"
            continue
        if STEPS_HEADER_RE.match(line):
            section = "steps"
            continue

        if section == "steps" or (section == "unknown" and NUMBERED_STEP_RE.match(line)):
            step = NUMBERED_STEP_RE.sub("", BULLET_RE.sub("", line)).strip()
            if step:
                steps.append(step)
            continue

        if section == "ingredients" or _looks_like_ingredient(line):
            ingredient = BULLET_RE.sub("", line).strip()
            if ingredient:
                ingredients.append(ingredient)

    return ParsedRecipe(title=title, servings=servings or 1, ingredients=ingredients, steps=steps)


__all__ = ["parse_recipe_text", "parse_ingredient_line", "parse_quantity", "ParsedRecipe"]
