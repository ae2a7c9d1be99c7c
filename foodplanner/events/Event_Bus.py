"""Simple Event Bus / Observer implementation for planner state changes.

Event names used so far:
  catalog.changed -> payload {"action": "added"|"updated"|"deleted"|"hidden", "recipe": Recipe}
  plan.generated -> payload {"plan": WeeklyPlan, "servings": int}
  plan.slot_changed -> payload {"meal_type": MealType, "day_index": int, "recipe": Recipe | None}
  plans.saved -> payload {"saved_plan": SavedMealPlan}
  plans.removed -> payload {"ids": [str, ...]}
  store.write_failed -> payload {"kind": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
CATALOG_CHANGED = "catalog.changed"
PLAN_GENERATED = "plan.generated"
PLAN_SLOT_CHANGED = "plan.slot_changed"
PLANS_SAVED = "plans.saved"
PLANS_REMOVED = "plans.removed"
STORE_WRITE_FAILED = "store.write_failed"

ALL_EVENTS = (CATALOG_CHANGED, PLAN_GENERATED, PLAN_SLOT_CHANGED, PLANS_SAVED, PLANS_REMOVED, STORE_WRITE_FAILED)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any = None):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception as e:
				logger.error("Error delivering %s to %s: %s", event_name, cb, e)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()

__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'ALL_EVENTS',
	'CATALOG_CHANGED', 'PLAN_GENERATED', 'PLAN_SLOT_CHANGED', 'PLANS_SAVED', 'PLANS_REMOVED',
	'STORE_WRITE_FAILED'
]
