from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from nutri.infra.Reference_Repository import get_reference_table
from nutri.logic.conversion.units import DEFAULT_CONVERTER
from nutri.logic.matching.matcher import IngredientMatcher

router = APIRouter()


@router.get("/api/ingredients")
def list_ingredients():
    """Canonical ingredient names in table order."""
    table = get_reference_table()
    return {"count": len(table), "ingredients": table.names()}


@router.get("/api/ingredients/match")
def match_ingredient(name: str = Query(..., min_length=1)):
    entry = IngredientMatcher(get_reference_table()).match(name)
    if entry is None:
        raise HTTPException(status_code=404, detail="Ingredient not found")
    return entry.to_dict()


@router.get("/api/units/convert")
def convert_units(qty: float = Query(...), unit: str = Query(default="g"),
                  ingredient: Optional[str] = Query(default=None)):
    """Grams for a quantity; unknown units fall back to grams unchanged."""
    grams = DEFAULT_CONVERTER.resolve_grams(qty, unit, ingredient)
    recognized = grams is not None
    is_volume = recognized and unit.strip().lower() in DEFAULT_CONVERTER.volume_to_ml
    return {
        "qty": qty,
        "unit": unit,
        "grams": grams if recognized else qty,
        "unit_recognized": recognized,
        "density_key": DEFAULT_CONVERTER.resolve_density_key(ingredient) if is_volume else None,
    }
