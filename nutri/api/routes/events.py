from typing import Optional

from fastapi import APIRouter, Query

from nutri.events.web_observers import get_events

router = APIRouter()


@router.get("/api/events")
def list_events(since: Optional[int] = Query(default=None, ge=0)):
    """Recent unmatched-ingredient / unknown-unit diagnostics (poll with since=next_cursor)."""
    return get_events(since)
