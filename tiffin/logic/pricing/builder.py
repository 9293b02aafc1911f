"""Plan builder.

Provides create_tiffin_plan(config=None): validates customer input and prices
a single subscription plan from the meal rate table.
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from tiffin.domain.Plan import TiffinPlan
from tiffin.utilities.constants import MEAL_PRICES
from tiffin.utilities.validators import PlanInput

logger = logging.getLogger(__name__)

__all__ = ["create_tiffin_plan"]


def create_tiffin_plan(config: Optional[Union[Mapping[str, Any], PlanInput]] = None) -> Optional[TiffinPlan]:
    """Build a priced plan from a customer configuration.

    Args:
        config: mapping with ``name`` (required), ``meal_type`` (or ``mealType``,
            default "veg") and ``days`` (default 30). None means no options given.

    Returns:
        dict { name, meal_type, days, daily_rate, total_cost }, or None when the
        name is blank, the meal type is unknown or days is not an integer.
    """
    if config is None:
        config = {}
    elif isinstance(config, Mapping):
        config = dict(config)
    try:
        plan_input = PlanInput.model_validate(config)
    except ValidationError as e:
        logger.debug(f"Rejected plan input: {[err['loc'] for err in e.errors()]}")
        return None

    daily_rate = MEAL_PRICES[plan_input.meal_type]
    return {
        'name': plan_input.name,
        'meal_type': plan_input.meal_type,
        'days': plan_input.days,
        'daily_rate': daily_rate,
        'total_cost': daily_rate * plan_input.days,
    }
