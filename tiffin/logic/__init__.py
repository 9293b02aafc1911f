"""Core pricing logic for tiffin subscription plans.

Subpackages:
- pricing: building plans and layering add-ons
- reporting: summaries across plans

All functions operate on plain dicts and keep no state between calls.
"""
from tiffin.logic.pricing.builder import create_tiffin_plan
from tiffin.logic.pricing.addons import apply_addons
from tiffin.logic.reporting.summary import combine_plans

__all__ = ["create_tiffin_plan", "combine_plans", "apply_addons"]
