from fastapi import FastAPI
import logging

from nutri.api.routes import events, ingredients, nutrition
from nutri.events.web_observers import start as start_event_observers
from nutri.infra.Reference_Repository import get_reference_table, get_taste_profiles

# Logging
logger = logging.getLogger("nutri_app")

# Initialize FastAPI app
app = FastAPI(title="Recipe Nutrition Estimator API")

# Include routers
app.include_router(nutrition.router)
app.include_router(ingredients.router)
app.include_router(events.router)


@app.on_event("startup")
def _load_reference_data():
    """Load the reference table up front so a broken deployment fails at startup."""
    table = get_reference_table()
    profiles = get_taste_profiles()
    logger.info("Reference data ready: %d ingredients, %d taste keywords", len(table), len(profiles))


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for estimation diagnostics."""
    start_event_observers()
    logger.info("Web observers for estimation events started")


@app.get("/health")
def health():
    return {"status": "ok", "ingredients": len(get_reference_table())}
