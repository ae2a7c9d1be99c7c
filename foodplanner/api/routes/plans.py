import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response

from foodplanner.api.state import get_state
from foodplanner.domain.MealType import MealType
from foodplanner.domain.SavedMealPlan import SavedMealPlan
from foodplanner.infra.pdf_utils import generate_pdf_for_plan
from foodplanner.logic.shopping.list_builder import build_shopping_list
from foodplanner.logic.state import PlannerState
from foodplanner.utilities.config import MAX_SERVINGS
from foodplanner.utilities.validators import GenerateInput, SavePlanInput, SlotUpdateInput

router = APIRouter(tags=["plans"])
logger = logging.getLogger(__name__)


def _plan_response(plan, servings: int, title: Optional[str] = None):
    return {"title": title, "servings": servings, "days": plan.days, "plan": plan.to_dict()}


def _shopping_response(plan, servings: int):
    items = build_shopping_list(plan, servings)
    return {"servings": servings, "items": [i.to_dict() for i in items], "count": len(items)}


def _pdf_response(pdf_bytes: bytes, filename: str):
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def _saved_or_404(state: PlannerState, plan_id: str) -> SavedMealPlan:
    saved = state.saved_plans.get(plan_id)
    if saved is None:
        raise HTTPException(status_code=404, detail="Saved plan not found")
    return saved


# -------------------- Current plan --------------------
@router.get("/api/plan")
def get_plan(state: PlannerState = Depends(get_state)):
    return _plan_response(state.weekly_plan, state.current_servings, "This Week's Plan")


@router.post("/api/plan/generate")
def generate_plan(payload: GenerateInput, state: PlannerState = Depends(get_state)):
    plan = state.generate(payload.servings)
    return _plan_response(plan, state.current_servings, "This Week's Plan")


@router.get("/api/plan/pdf")
def export_plan_pdf(state: PlannerState = Depends(get_state)):
    pdf_bytes = generate_pdf_for_plan(state.weekly_plan, "This Week's Plan", state.current_servings)
    return _pdf_response(pdf_bytes, "meal_plan.pdf")


@router.put("/api/plan/{meal_type}/{day_index}")
def change_slot(meal_type: str, day_index: int, payload: SlotUpdateInput,
                state: PlannerState = Depends(get_state)):
    try:
        recipe = state.set_slot(MealType.parse(meal_type), day_index, payload.recipe_id)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown meal type: {meal_type}")
    except IndexError:
        raise HTTPException(status_code=400, detail=f"Invalid day: {day_index}")
    except KeyError:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return {"status": "success", "recipe": recipe.to_dict()}


@router.delete("/api/plan/{meal_type}/{day_index}")
def remove_slot(meal_type: str, day_index: int, state: PlannerState = Depends(get_state)):
    try:
        state.remove_slot(MealType.parse(meal_type), day_index)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown meal type: {meal_type}")
    except IndexError:
        raise HTTPException(status_code=400, detail=f"Invalid day: {day_index}")
    return {"status": "success"}


@router.get("/api/shopping-list")
def shopping_list(servings: Optional[int] = Query(default=None, ge=1, le=MAX_SERVINGS),
                  state: PlannerState = Depends(get_state)):
    return _shopping_response(state.weekly_plan, servings or state.current_servings)


# -------------------- Saved plans --------------------
@router.get("/api/plans")
def list_saved_plans(state: PlannerState = Depends(get_state)):
    plans = state.saved_plans.list()
    return {
        "count": len(plans),
        "plans": [{"id": p.id, "name": p.name, "date": p.date.isoformat(), "servings": p.servings} for p in plans],
    }


@router.post("/api/plans")
def save_current_plan(payload: SavePlanInput, state: PlannerState = Depends(get_state)):
    saved = state.save_current_plan(payload.name)
    return {"status": "success", "plan": saved.to_dict()}


@router.get("/api/plans/{plan_id}")
def get_saved_plan(plan_id: str, state: PlannerState = Depends(get_state)):
    saved = _saved_or_404(state, plan_id)
    body = _plan_response(saved.plan, saved.servings, saved.name)
    body.update({"id": saved.id, "date": saved.date.isoformat()})
    return body


@router.get("/api/plans/{plan_id}/shopping-list")
def saved_plan_shopping_list(plan_id: str, state: PlannerState = Depends(get_state)):
    saved = _saved_or_404(state, plan_id)
    return _shopping_response(saved.plan, saved.servings)


@router.get("/api/plans/{plan_id}/pdf")
def export_saved_plan_pdf(plan_id: str, state: PlannerState = Depends(get_state)):
    saved = _saved_or_404(state, plan_id)
    pdf_bytes = generate_pdf_for_plan(saved.plan, saved.name, saved.servings)
    return _pdf_response(pdf_bytes, f"meal_plan_{saved.date.date().isoformat()}.pdf")


@router.delete("/api/plans/{plan_id}")
def delete_saved_plan(plan_id: str, state: PlannerState = Depends(get_state)):
    if not state.remove_saved_plans([plan_id]):
        raise HTTPException(status_code=404, detail="Saved plan not found")
    return {"status": "success", "deleted": plan_id}
