"""Event helper utilities.

This module provides helper functions for publishing planner events so the
payload shapes stay in one place.

Quick import:
    from foodplanner.events.event_helpers import (
        publish_catalog_changed, publish_plan_generated, publish_slot_changed,
        publish_plan_saved, publish_plans_removed, publish_write_failed
    )
"""
from __future__ import annotations
from typing import Any, Iterable, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    CATALOG_CHANGED, PLAN_GENERATED, PLAN_SLOT_CHANGED, PLANS_SAVED, PLANS_REMOVED,
    STORE_WRITE_FAILED
)

__all__ = [
    'publish_catalog_changed', 'publish_plan_generated', 'publish_slot_changed',
    'publish_plan_saved', 'publish_plans_removed', 'publish_write_failed'
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_catalog_changed(bus: Optional[EventBus], action: str, recipe: Any):
    """Publish a catalog.changed event (action: added, updated, deleted or hidden)."""
    _bus(bus).publish(CATALOG_CHANGED, {
        'action': action,
        'recipe': recipe
    })


def publish_plan_generated(bus: Optional[EventBus], plan: Any, servings: int):
    _bus(bus).publish(PLAN_GENERATED, {
        'plan': plan,
        'servings': servings
    })


def publish_slot_changed(bus: Optional[EventBus], meal_type: Any, day_index: int, recipe: Any):
    """Publish a plan.slot_changed event; recipe is None when the slot was cleared."""
    _bus(bus).publish(PLAN_SLOT_CHANGED, {
        'meal_type': meal_type,
        'day_index': day_index,
        'recipe': recipe
    })


def publish_plan_saved(bus: Optional[EventBus], saved_plan: Any):
    _bus(bus).publish(PLANS_SAVED, {'saved_plan': saved_plan})


def publish_plans_removed(bus: Optional[EventBus], ids: Iterable[str]):
    ids_list = list(ids) if not isinstance(ids, list) else ids
    _bus(bus).publish(PLANS_REMOVED, {'ids': ids_list, 'count': len(ids_list)})


def publish_write_failed(bus: Optional[EventBus], kind: str):
    """Side-channel diagnostic for a best-effort persistence write that did not land."""
    _bus(bus).publish(STORE_WRITE_FAILED, {'kind': kind})
