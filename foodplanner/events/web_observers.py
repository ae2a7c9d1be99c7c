"""Web-facing observers for planner events.

This module subscribes to an EventBus (the GLOBAL_EVENT_BUS by default) for
every planner event and stores a lightweight in-memory ring buffer of recent
events that the web layer can poll (`/api/events?since=<cursor>`).

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events.
  * A Lock guards the buffer; uvicorn may serve requests from a thread pool.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import EventBus, GLOBAL_EVENT_BUS, ALL_EVENTS

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events


def _describe(value: Any) -> Any:
    """Reduce domain objects to JSON-friendly fields for the UI."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if hasattr(value, 'value') and hasattr(value, 'label'):  # MealType
        return value.value
    if hasattr(value, 'name') and hasattr(value, 'id'):  # Recipe / SavedMealPlan
        return {'id': value.id, 'name': value.name}
    if isinstance(value, (list, tuple)):
        return [_describe(v) for v in value]
    return str(value)


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat()
        }
        if isinstance(payload, dict):
            for k, v in payload.items():
                if k == 'plan':
                    continue  # full plans are fetched from /api/plan
                evt[k] = _describe(v)
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus: Optional[EventBus] = None):
    """Idempotent start: subscribe the recorder once per bus."""
    target = bus if bus is not None else GLOBAL_EVENT_BUS
    for name in ALL_EVENTS:
        target.subscribe(name, _record)
    logger.debug("Web observers subscribed to %d planner events", len(ALL_EVENTS))


def stop(bus: Optional[EventBus] = None):
    target = bus if bus is not None else GLOBAL_EVENT_BUS
    for name in ALL_EVENTS:
        target.unsubscribe(name, _record)


def clear():
    """Drop buffered events (cursor keeps counting)."""
    with _lock:
        _events.clear()


def get_events(since: int | None = None) -> Dict[str, Any]:
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


__all__ = ['start', 'stop', 'clear', 'get_events']
