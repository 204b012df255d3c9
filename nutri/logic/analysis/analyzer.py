"""Local recipe analysis: pasted text -> parsed recipe, nutrition and inferred tags."""
import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from nutri.logic.analysis.inference import (
    detect_allergens,
    generate_suggestions,
    generate_summary,
    infer_diets,
    taste_profile,
)
from nutri.logic.parsing.recipe_text import parse_recipe_text
from nutri.logic.reporting.daily_values import percent_daily_values
from nutri.logic.reporting.nutrition import EstimateBreakdown, NutritionEstimator

logger = logging.getLogger(__name__)


def analyze_with_breakdown(text: str, estimator: NutritionEstimator,
                           taste_profiles: Optional[Mapping[str, Sequence[str]]] = None
                           ) -> Tuple[Dict[str, Any], EstimateBreakdown]:
    """Analyze a plain-text recipe without any remote service.

    Returns structure:
    {
      'title': str, 'servings': int,
      'ingredients': [ { qty, unit, item }, ... ], 'steps': [str, ...],
      'inferred': { 'allergens': [...], 'diets': [...], 'cuisines': [], 'taste': [...] },
      'nutrition_per_serving': { calories, protein, ... },
      'daily_values': { calories: %, ... },
      'summary': str, 'suggestions': [str, ...],
      'unmatched': [ item, ... ]
    }
    """
    parsed = parse_recipe_text(text)
    lines = parsed.ingredient_lines()

    breakdown: EstimateBreakdown = estimator.estimate_breakdown(lines, parsed.servings)
    per_serving = breakdown.per_serving.to_dict()

    diets = infer_diets(lines)
    taste = taste_profile(lines, taste_profiles or {})
    logger.info("Analyzed %r: %d ingredients, %d steps, %d unmatched",
                parsed.title, len(lines), len(parsed.steps), len(breakdown.unmatched))

    analysis = {
        "title": parsed.title,
        "servings": parsed.servings,
        "ingredients": [ln.to_dict() for ln in lines],
        "steps": parsed.steps,
        "inferred": {
            "allergens": detect_allergens(lines),
            "diets": diets,
            "cuisines": [],
            "taste": taste,
        },
        "nutrition_per_serving": per_serving,
        "daily_values": percent_daily_values(per_serving),
        "summary": generate_summary(parsed.title, parsed.servings, len(lines), diets),
        "suggestions": generate_suggestions(per_serving, taste),
        "unmatched": [d.line.item for d in breakdown.unmatched],
    }
    return analysis, breakdown


def analyze_recipe_local(text: str, estimator: NutritionEstimator,
                         taste_profiles: Optional[Mapping[str, Sequence[str]]] = None) -> Dict[str, Any]:
    analysis, _ = analyze_with_breakdown(text, estimator, taste_profiles)
    return analysis


__all__ = ["analyze_recipe_local", "analyze_with_breakdown"]
