"""SavedMealPlan domain entity: a named, dated snapshot of a WeeklyPlan and its servings."""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional
from uuid import uuid4
from foodplanner.domain.Plan import WeeklyPlan
from foodplanner.utilities.constants import PLAN_NAME_TEMPLATE


def monday_of(day: date) -> datetime:
    """Midnight of the Monday starting the week that contains ``day``."""
    if isinstance(day, datetime):
        day = day.date()
    monday = day - timedelta(days=day.weekday())
    return datetime(monday.year, monday.month, monday.day)


def default_plan_name(today: Optional[date] = None) -> str:
    monday = monday_of(today or date.today())
    return PLAN_NAME_TEMPLATE.format(month=monday.strftime("%B"), day=monday.day)


@dataclass(frozen=True)
class SavedMealPlan:
    name: str
    date: datetime
    plan: WeeklyPlan
    servings: int
    id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self):
        if self.servings < 1:
            raise ValueError(f"Servings must be positive: {self.servings}")

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return SavedMealPlan(
            id=str(d["id"]),
            name=str(d.get("name", "")),
            date=datetime.fromisoformat(str(d["date"]).replace("Z", "+00:00")),
            plan=WeeklyPlan.from_dict(d.get("plan", {})),
            servings=int(d.get("servings", 1)),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "date": self.date.isoformat(),
            "plan": self.plan.to_dict(),
            "servings": self.servings,
        }
