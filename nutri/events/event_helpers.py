"""Event helper utilities.

Helpers that turn an estimation breakdown into diagnostics events on the
global event bus.

Quick import:
    from nutri.events.event_helpers import publish_breakdown_diagnostics
"""
from __future__ import annotations
from typing import Any, Optional

from .Event_Bus import (
    create_event,
    ESTIMATE_UNMATCHED_INGREDIENT, ESTIMATE_UNKNOWN_UNIT,
)

__all__ = [
    'publish_unmatched_ingredient', 'publish_unknown_unit', 'publish_breakdown_diagnostics',
    'ESTIMATE_UNMATCHED_INGREDIENT', 'ESTIMATE_UNKNOWN_UNIT',
]


def publish_unmatched_ingredient(item: str, qty: Optional[float], unit: str, grams: Optional[float]):
    """Publish an estimate.unmatched_ingredient event."""
    create_event(ESTIMATE_UNMATCHED_INGREDIENT, {
        'item': item,
        'qty': qty,
        'unit': unit,
        'grams': grams,
    })


def publish_unknown_unit(item: str, qty: Optional[float], unit: str):
    """Publish an estimate.unknown_unit event."""
    create_event(ESTIMATE_UNKNOWN_UNIT, {
        'item': item,
        'qty': qty,
        'unit': unit,
    })


def publish_breakdown_diagnostics(breakdown: Any) -> int:
    """Publish one event per unmatched line and per unknown unit.

    Returns the number of events published.
    """
    count = 0
    for d in breakdown.unmatched:
        publish_unmatched_ingredient(d.line.item, d.line.qty, d.line.unit, d.grams)
        count += 1
    for d in breakdown.unknown_units:
        publish_unknown_unit(d.line.item, d.line.qty, d.line.unit)
        count += 1
    return count
