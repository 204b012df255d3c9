"""Event bus for estimation diagnostics.

Event names:
  estimate.unmatched_ingredient -> payload {"item": str, "qty": float, "unit": str, "grams": float}
  estimate.unknown_unit -> payload {"item": str, "qty": float, "unit": str}

Subscribers are callables taking (event_name, payload). A bus built with
known_events raises ValueError for any other event name.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, FrozenSet, Iterable, List, Optional

logger = logging.getLogger(__name__)

ESTIMATE_UNMATCHED_INGREDIENT = "estimate.unmatched_ingredient"
ESTIMATE_UNKNOWN_UNIT = "estimate.unknown_unit"

DIAGNOSTIC_EVENTS: FrozenSet[str] = frozenset({ESTIMATE_UNMATCHED_INGREDIENT, ESTIMATE_UNKNOWN_UNIT})

Subscriber = Callable[[str, Any], None]


class EventBus:
	def __init__(self, known_events: Optional[Iterable[str]] = None):
		self._known: Optional[FrozenSet[str]] = frozenset(known_events) if known_events is not None else None
		self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

	def _check(self, event_name: str):
		if self._known is not None and event_name not in self._known:
			raise ValueError(f"Unknown event {event_name!r}; expected one of {sorted(self._known)}")

	def subscribe(self, event_name: str, callback: Subscriber):
		self._check(event_name)
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Subscriber):
		subscribers = self._subscribers.get(event_name)
		if subscribers and callback in subscribers:
			subscribers.remove(callback)

	def subscriber_count(self, event_name: str) -> int:
		return len(self._subscribers.get(event_name, ()))

	def publish(self, event_name: str, payload: Any) -> int:
		"""Deliver payload to every subscriber; returns how many received it without error."""
		self._check(event_name)
		delivered = 0
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Diagnostics subscriber %r failed on %s", cb, event_name)
			else:
				delivered += 1
		if not delivered:
			logger.debug("No subscriber took %s", event_name)
		return delivered


# Process-wide bus, restricted to the diagnostics events
GLOBAL_EVENT_BUS = EventBus(DIAGNOSTIC_EVENTS)


def create_event(event_name: str, payload: Any = None) -> int:
	"""Publish an event on the global bus."""
	return GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'create_event', 'DIAGNOSTIC_EVENTS',
	'ESTIMATE_UNMATCHED_INGREDIENT', 'ESTIMATE_UNKNOWN_UNIT'
]
