"""Web-facing observers for estimation diagnostics.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - estimate.unmatched_ingredient
  - estimate.unknown_unit

and stores a lightweight in-memory ring buffer of recent events that the
web layer can serve, so whoever maintains the reference table can see which
ingredient names and units users actually type.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A simple Lock guards the buffer; with several worker processes each one
    keeps its own buffer.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from nutri.utilities.config import MAX_EVENTS
from .Event_Bus import (
    GLOBAL_EVENT_BUS, ESTIMATE_UNMATCHED_INGREDIENT, ESTIMATE_UNKNOWN_UNIT
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            for k in ('item', 'qty', 'unit', 'grams'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]
    logger.debug("Recorded %s event #%s", event_name, evt['id'])


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    GLOBAL_EVENT_BUS.subscribe(ESTIMATE_UNMATCHED_INGREDIENT, _record)
    GLOBAL_EVENT_BUS.subscribe(ESTIMATE_UNKNOWN_UNIT, _record)
    _started = True


def get_events(since: Optional[int] = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


def clear():
    """Drop recorded events (cursor keeps increasing)."""
    with _lock:
        _events.clear()


__all__ = ['start', 'get_events', 'clear']
