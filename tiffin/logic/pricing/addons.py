"""Add-on pricing.

Provides apply_addons(plan, *addons): layers per-day extras onto an existing
plan and returns a new, repriced plan. The plan passed in is left untouched.
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from pydantic import ValidationError

from tiffin.domain.Plan import AugmentedPlan
from tiffin.utilities.validators import AddonInput, PlanRecord

logger = logging.getLogger(__name__)

__all__ = ["apply_addons"]


def _valid_addon(addon: Any) -> Optional[AddonInput]:
    if isinstance(addon, AddonInput):
        return addon
    if not isinstance(addon, Mapping):
        return None
    try:
        return AddonInput.model_validate(dict(addon))
    except ValidationError:
        return None


def apply_addons(plan: Optional[Mapping[str, Any]], *addons: Any) -> Optional[AugmentedPlan]:
    """Return a copy of ``plan`` with the valid add-ons priced in.

    Addons without a non-empty name or a numeric price are skipped. The result
    carries every field of ``plan`` plus ``addon_names`` (in input order), with
    ``daily_rate`` and ``total_cost`` recomputed.
    """
    if not isinstance(plan, Mapping):
        return None
    try:
        base = PlanRecord.model_validate(dict(plan))
    except ValidationError as e:
        logger.debug(f"Rejected base plan: {[err['loc'] for err in e.errors()]}")
        return None

    addon_price = 0
    addon_names: List[str] = []
    for addon in addons:
        valid = _valid_addon(addon)
        if valid is None:
            logger.debug(f"Skipping invalid addon: {addon!r}")
            continue
        addon_price += valid.price
        addon_names.append(valid.name)

    daily_rate = base.daily_rate + addon_price
    return {
        **plan,
        'daily_rate': daily_rate,
        'total_cost': daily_rate * base.days,
        'addon_names': addon_names,
    }
