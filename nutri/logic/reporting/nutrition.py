"""Recipe nutrition estimation.

Each countable line is converted to grams, matched against the reference
table and scaled from the per-100g profile. Totals are divided by the
serving count (never less than 1) and rounded to one decimal.
"""
import logging
import math
from typing import Any, Dict, Iterable, List, Optional

from nutri.domain.IngredientReference import ReferenceTable
from nutri.domain.NutrientTotals import NutrientTotals
from nutri.domain.RecipeLine import RecipeLine
from nutri.logic.conversion.units import UnitConverter, DEFAULT_CONVERTER
from nutri.logic.matching.matcher import IngredientMatcher
from nutri.utilities.constants import DEFAULT_UNIT

logger = logging.getLogger(__name__)


def _as_line(raw) -> RecipeLine:
    if isinstance(raw, RecipeLine):
        return raw
    return RecipeLine.from_dict(raw)


class LineEstimate:
    """How a single input line was resolved."""

    def __init__(self, line: RecipeLine, grams: Optional[float] = None, unit_recognized: bool = False,
                 matched: Optional[str] = None, skipped: bool = False):
        self.line = line
        self.grams = grams
        self.unit_recognized = unit_recognized
        self.matched = matched
        self.skipped = skipped

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item": self.line.item,
            "qty": self.line.qty,
            "unit": self.line.unit,
            "grams": None if self.grams is None else round(self.grams, 2),
            "unit_recognized": self.unit_recognized,
            "matched": self.matched,
            "skipped": self.skipped,
        }


class EstimateBreakdown:
    def __init__(self, per_serving: NutrientTotals, lines: List[LineEstimate]):
        self.per_serving = per_serving
        self.lines = lines

    @property
    def unmatched(self) -> List[LineEstimate]:
        return [d for d in self.lines if not d.skipped and d.matched is None]

    @property
    def unknown_units(self) -> List[LineEstimate]:
        return [d for d in self.lines if not d.skipped and not d.unit_recognized]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "per_serving": self.per_serving.to_dict(),
            "lines": [d.to_dict() for d in self.lines],
        }


class NutritionEstimator:
    """Estimates per-serving nutrients for recipe lines.

    The reference table is passed in, so one estimator can be shared by
    concurrent callers: estimation only reads the table and the unit tables.
    """

    def __init__(self, table: ReferenceTable, converter: Optional[UnitConverter] = None,
                 matcher: Optional[IngredientMatcher] = None):
        self.table = table
        self.converter = converter or DEFAULT_CONVERTER
        self.matcher = matcher or IngredientMatcher(table)

    def estimate_breakdown(self, lines: Iterable, servings) -> EstimateBreakdown:
        """Estimate and keep per-line resolution details.

        Returns EstimateBreakdown with:
          per_serving: NutrientTotals rounded to one decimal
          lines: one LineEstimate per input line, in input order
        """
        totals = NutrientTotals()
        details: List[LineEstimate] = []

        for raw in lines or []:
            line = _as_line(raw)
            if not line.is_countable():
                details.append(LineEstimate(line, skipped=True))
                continue

            unit = line.unit.strip() or DEFAULT_UNIT
            grams = self.converter.resolve_grams(line.qty, unit, line.item)
            unit_recognized = grams is not None
            if grams is None:
                grams = line.qty  # unknown unit: treat quantity as grams

            entry = self.matcher.match(line.item)
            skipped = not math.isfinite(grams)
            if entry is not None and not skipped:
                # reference values are per 100 g
                skipped = not totals.add(entry, grams / 100)
            if skipped:
                logger.warning("Skipped %r: %s g overflows the nutrient totals", line.item, grams)

            details.append(LineEstimate(
                line, grams=None if skipped else grams, unit_recognized=unit_recognized,
                matched=entry.name if entry is not None else None, skipped=skipped,
            ))

        breakdown = EstimateBreakdown(totals.per_serving(servings), details)
        logger.debug("Estimated %d lines (%d unmatched, %d unknown units)",
                     len(details), len(breakdown.unmatched), len(breakdown.unknown_units))
        return breakdown

    def estimate(self, lines: Iterable, servings) -> NutrientTotals:
        return self.estimate_breakdown(lines, servings).per_serving


def estimate_nutrition(lines: Iterable, servings, table: ReferenceTable) -> Dict[str, float]:
    """Per-serving nutrient mapping with the full fixed key set.

    Lines may be RecipeLine objects or dicts shaped like {qty, unit, item}.
    """
    return NutritionEstimator(table).estimate(lines, servings).to_dict()


__all__ = ["NutritionEstimator", "EstimateBreakdown", "LineEstimate", "estimate_nutrition"]
