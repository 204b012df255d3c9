"""RecipeLine domain entity: one ingredient row of a recipe (quantity, unit, item)."""
import math
from typing import Optional


def _coerce_qty(value) -> Optional[float]:
    """Turn a raw quantity into a float, or None when it is unset."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        qty = float(value)
    except (TypeError, ValueError):
        return None
    return qty if math.isfinite(qty) else None


class RecipeLine:
    def __init__(self, qty: Optional[float] = None, unit: str = "", item: str = ""):
        # qty None means "unset": the line is skipped, not counted as zero
        self.qty = qty
        self.unit = unit or ""
        self.item = item or ""

    def is_countable(self) -> bool:
        '''True when the line takes part in aggregation (qty set, item not blank).'''
        return self.qty is not None and bool(self.item.strip())

    def __str__(self) -> str:
        qty = "-" if self.qty is None else f"{self.qty:g}"
        return f"{qty} {self.unit} {self.item}".replace("  ", " ").strip()

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, RecipeLine):
            return NotImplemented
        return (self.qty, self.unit, self.item) == (other.qty, other.unit, other.item)

    @staticmethod
    def from_dict(data):
        '''Creates a RecipeLine from a dictionary. Ignores unknown keys.

        Accepts qty as a number, a numeric string, or ""/None for "unset".
        '''
        d = dict(data) if isinstance(data, dict) else {}
        unit = d.get("unit")
        item = d.get("item")
        return RecipeLine(
            qty=_coerce_qty(d.get("qty")),
            unit=unit if isinstance(unit, str) else "",
            item=item if isinstance(item, str) else "",
        )

    def to_dict(self):
        return {
            "qty": self.qty,
            "unit": self.unit,
            "item": self.item,
        }
