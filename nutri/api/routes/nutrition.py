import logging
from functools import lru_cache

from fastapi import APIRouter

from nutri.events.event_helpers import publish_breakdown_diagnostics
from nutri.infra.Reference_Repository import get_reference_table, get_taste_profiles
from nutri.logic.analysis.analyzer import analyze_with_breakdown
from nutri.logic.reporting.daily_values import percent_daily_values
from nutri.logic.reporting.nutrition import NutritionEstimator
from nutri.utilities.validators import AnalyzeTextRequest, EstimateRequest

router = APIRouter(prefix="/api/nutrition")
logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_estimator() -> NutritionEstimator:
    """Shared estimator over the process-wide reference table."""
    return NutritionEstimator(get_reference_table())


@router.post("/estimate")
def estimate(payload: EstimateRequest):
    """Per-serving nutrients, % daily values and per-line resolution details."""
    lines = [ln.to_line() for ln in payload.lines]
    breakdown = get_estimator().estimate_breakdown(lines, payload.servings)
    published = publish_breakdown_diagnostics(breakdown)
    if published:
        logger.info("Estimate with %d diagnostics (%d lines)", published, len(lines))
    per_serving = breakdown.per_serving.to_dict()
    return {
        "servings": payload.servings,
        "per_serving": per_serving,
        "daily_values": percent_daily_values(per_serving),
        "lines": [d.to_dict() for d in breakdown.lines],
    }


@router.post("/analyze")
def analyze(payload: AnalyzeTextRequest):
    """Parse and analyze a pasted plain-text recipe."""
    analysis, breakdown = analyze_with_breakdown(payload.text, get_estimator(), get_taste_profiles())
    publish_breakdown_diagnostics(breakdown)
    return analysis
