from fastapi import FastAPI, Body
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError
from typing import Any, List, Optional
import logging

from tiffin.logic import apply_addons, combine_plans, create_tiffin_plan
from tiffin.utilities.constants import DEFAULT_DAYS, DEFAULT_MEAL_TYPE, MEAL_PRICES
from tiffin.utilities.validators import SummaryItem

# Logging
logger = logging.getLogger("tiffin_app")

# Initialize FastAPI app
app = FastAPI(title="Tiffin Service Pricing API")


class AddonsRequest(BaseModel):
    plan: Optional[Any] = None
    addons: List[Any] = Field(default_factory=list)


# -------------------- API: Meal types --------------------
@app.get('/api/meal-types')
def api_meal_types():
    """Return the per-day rate table and the defaults applied to new plans."""
    return {
        'meal_types': dict(MEAL_PRICES),
        'default_meal_type': DEFAULT_MEAL_TYPE,
        'default_days': DEFAULT_DAYS,
    }


# -------------------- API: Plans --------------------
@app.post('/api/plans')
def api_create_plan(payload: Any = Body(default=None)):
    """Price a single plan from { name, meal_type, days }."""
    plan = create_tiffin_plan(payload)
    if plan is None:
        logger.info("Rejected plan request")
        return JSONResponse(status_code=400, content={"error": "Invalid plan input"})
    logger.info("Created %s plan for %s (%d days)", plan['meal_type'], plan['name'], plan['days'])
    return plan


@app.post('/api/plans/summary')
def api_plans_summary(payload: Any = Body(default=None)):
    """Summarise a JSON array of plans.

    Response JSON structure:
        {
          "total_customers": <int>,
          "total_revenue": <number>,
          "meal_breakdown": { <meal_type>: <count>, ... }
        }
    """
    if not isinstance(payload, list) or not all(isinstance(p, dict) for p in payload):
        return JSONResponse(status_code=400, content={"error": "Plans must be a list of objects"})
    try:
        for item in payload:
            SummaryItem.model_validate(item)
    except ValidationError as e:
        logger.info("Rejected summary request: %s", [err['loc'] for err in e.errors()])
        return JSONResponse(status_code=400, content={"error": "Plans must be a list of objects"})
    summary = combine_plans(*payload)
    if summary is None:
        return JSONResponse(status_code=400, content={"error": "No plans supplied"})
    return summary


@app.post('/api/plans/addons')
def api_apply_addons(req: AddonsRequest):
    """Reprice a plan with extra per-day items."""
    plan = apply_addons(req.plan, *req.addons)
    if plan is None:
        logger.info("Rejected addons request: invalid base plan")
        return JSONResponse(status_code=400, content={"error": "Invalid base plan"})
    logger.info("Applied %d addon(s) to plan for %s", len(plan['addon_names']), plan.get('name'))
    return plan
