from typing import Optional
import logging

from fastapi import FastAPI, Query

from foodplanner.api.routes import plans, recipes
from foodplanner.events.web_observers import start as start_event_observers, get_events as get_web_events

# Logging
logger = logging.getLogger("foodplanner_app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Meal Planner API")

# Include routers
app.include_router(recipes.router)
app.include_router(plans.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web notifications when the app starts."""
    start_event_observers()
    logger.info("Web observers for planner events started")


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.get("/api/events")
def api_events(since: Optional[int] = Query(default=None, ge=0)):
    """Recent planner events; poll with since=<next_cursor> to receive only newer ones."""
    return get_web_events(since)
