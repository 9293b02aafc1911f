"""Plan records: shapes of the plain dicts passed between the pricing functions."""
from typing import Dict, List, TypedDict, Union

Number = Union[int, float]


class TiffinPlan(TypedDict):
    name: str
    meal_type: str
    days: int
    daily_rate: Number
    total_cost: Number


class AugmentedPlan(TiffinPlan):
    addon_names: List[str]


class Addon(TypedDict):
    name: str
    price: Number


class PlanSummary(TypedDict):
    total_customers: int
    total_revenue: Number
    meal_breakdown: Dict[str, int]
