"""Percent daily value for per-serving nutrient amounts (2000 kcal reference diet)."""
import math
from typing import Dict, Mapping, Optional

from nutri.utilities.constants import DAILY_VALUES


def percent_daily_value(nutrient: str, amount: Optional[float]) -> int:
    dv = DAILY_VALUES.get(nutrient, 0)
    amt = amount if isinstance(amount, (int, float)) else 0
    if dv <= 0:
        return 0
    return int(math.floor(amt / dv * 100 + 0.5))


def percent_daily_values(per_serving: Mapping[str, float]) -> Dict[str, int]:
    """Map every nutrient with a daily value to its whole-number percentage.

    Missing amounts count as 0%.
    """
    return {key: percent_daily_value(key, per_serving.get(key)) for key in DAILY_VALUES}


__all__ = ["percent_daily_value", "percent_daily_values"]
