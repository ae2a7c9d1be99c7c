import copy
import logging
from datetime import date
from typing import Iterable, List, Optional
from foodplanner.domain.Plan import WeeklyPlan
from foodplanner.domain.SavedMealPlan import SavedMealPlan, monday_of
from foodplanner.events.Event_Bus import GLOBAL_EVENT_BUS
from foodplanner.events.event_helpers import publish_plan_saved, publish_plans_removed, publish_write_failed
from foodplanner.utilities.constants import SAVED_PLANS

logger = logging.getLogger(__name__)


class SavedPlanRepository:
    """Saved meal plans, kept in creation order and persisted as one JSON array."""

    def __init__(self, store=None, bus=None):
        self._store = store
        self._event_bus = bus if bus is not None else GLOBAL_EVENT_BUS
        self._plans: List[SavedMealPlan] = self._load()

    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _load(self) -> List[SavedMealPlan]:
        if self._store is None:
            return []
        records = self._store.load(SAVED_PLANS)
        if not isinstance(records, list):
            return []
        try:
            return [SavedMealPlan.from_dict(entry) for entry in records]
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed saved plans record, ignoring it: {e}")
            return []

    def _persist(self):
        if self._store is None:
            return
        if not self._store.save(SAVED_PLANS, [p.to_dict() for p in self._plans]):
            logger.warning("Could not persist saved plans; keeping in-memory list")
            publish_write_failed(self._event_bus, SAVED_PLANS)

    def list(self) -> List[SavedMealPlan]:
        return list(self._plans)

    def get(self, plan_id: str) -> Optional[SavedMealPlan]:
        for plan in self._plans:
            if plan.id == plan_id:
                return plan
        return None

    def create(self, name: str, plan: WeeklyPlan, servings: int, today: Optional[date] = None) -> SavedMealPlan:
        """Snapshot ``plan`` under ``name``, dated to the Monday of the current week."""
        saved = SavedMealPlan(
            name=name,
            date=monday_of(today or date.today()),
            plan=copy.deepcopy(plan),
            servings=servings,
        )
        self._plans.append(saved)
        self._persist()
        logger.info(f"Saved meal plan '{saved.name}' ({saved.id})")
        publish_plan_saved(self._event_bus, saved)
        return saved

    def delete(self, plan_id: str) -> bool:
        return bool(self.delete_many([plan_id]))

    def delete_many(self, plan_ids: Iterable[str]) -> List[str]:
        wanted = set(plan_ids)
        removed = [p.id for p in self._plans if p.id in wanted]
        if not removed:
            return []
        self._plans = [p for p in self._plans if p.id not in wanted]
        self._persist()
        logger.info(f"Removed {len(removed)} saved meal plan(s)")
        publish_plans_removed(self._event_bus, removed)
        return removed

    def delete_at(self, indices: Iterable[int]) -> List[str]:
        """Remove plans by list position (out-of-range positions are ignored)."""
        ids = [self._plans[i].id for i in set(indices) if 0 <= i < len(self._plans)]
        return self.delete_many(ids)

    def __len__(self) -> int:
        return len(self._plans)
