"""Process-wide PlannerState used by the API routes (override get_state in tests)."""
import logging
from threading import Lock
from typing import Optional

from foodplanner.events.Event_Bus import GLOBAL_EVENT_BUS
from foodplanner.infra.paths import DATA_DIR
from foodplanner.logic.state import PlannerState

logger = logging.getLogger(__name__)

_lock = Lock()
_state: Optional[PlannerState] = None


def get_state() -> PlannerState:
    global _state
    with _lock:
        if _state is None:
            _state = PlannerState.open(DATA_DIR, bus=GLOBAL_EVENT_BUS)
            logger.info("Planner state opened at %s", DATA_DIR)
        return _state
