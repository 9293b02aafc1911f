"""Plan summary aggregation.

Provides combine_plans(*plans): customer count, revenue and a per-meal-type
breakdown over any number of plans.
"""
from collections import defaultdict
from typing import Any, Dict, Mapping, Optional

from tiffin.domain.Plan import PlanSummary


def combine_plans(*plans: Mapping[str, Any]) -> Optional[PlanSummary]:
    """Summarise plans as { total_customers, total_revenue, meal_breakdown }.

    Each plan counts as one customer. Only meal types that occur appear in the
    breakdown. Returns None when no plans are given.
    """
    if not plans:
        return None

    total_revenue = 0
    breakdown: Dict[str, int] = defaultdict(int)
    for plan in plans:
        total_revenue += plan.get('total_cost', 0)
        breakdown[plan.get('meal_type')] += 1

    return {
        'total_customers': len(plans),
        'total_revenue': total_revenue,
        'meal_breakdown': dict(breakdown),
    }

__all__ = ["combine_plans"]
