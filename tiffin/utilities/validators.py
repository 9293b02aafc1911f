"""
Input validation schemas using Pydantic for plan building and add-on pricing.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator, model_validator
from typing import Annotated, Optional, Union

from tiffin.utilities.constants import DEFAULT_DAYS, DEFAULT_MEAL_TYPE, MEAL_PRICES

# Finite numbers only: JSON bodies may carry Infinity/NaN
Price = Union[StrictInt, Annotated[float, Field(strict=True, allow_inf_nan=False)]]


class PlanInput(BaseModel):
    """Schema for customer plan configuration."""
    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr
    meal_type: StrictStr = Field(DEFAULT_MEAL_TYPE, alias='mealType')
    days: StrictInt = DEFAULT_DAYS

    @model_validator(mode='before')
    @classmethod
    def drop_unset(cls, data):
        """Keys explicitly set to None fall back to their defaults.

        ``meal_type`` and ``mealType`` may both be given only if they agree.
        """
        if isinstance(data, dict):
            data = {k: v for k, v in data.items() if v is not None}
            if 'meal_type' in data and 'mealType' in data and data['meal_type'] != data['mealType']:
                raise ValueError('Conflicting meal_type and mealType')
        return data

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Reject blank names; the name itself is kept as given."""
        if not v.strip():
            raise ValueError('Plan name cannot be empty')
        return v

    @field_validator('meal_type')
    @classmethod
    def validate_meal_type(cls, v):
        if v not in MEAL_PRICES:
            raise ValueError(f"Unknown meal type: {v!r}")
        return v


class AddonInput(BaseModel):
    """Schema for a single add-on (extra item priced per day)."""
    name: StrictStr = Field(..., min_length=1)
    price: Price


class PlanRecord(BaseModel):
    """Minimal shape a plan needs before add-ons can be priced onto it."""
    model_config = ConfigDict(extra='allow')

    daily_rate: Price
    days: StrictInt


class SummaryItem(BaseModel):
    """Fields of a plan that a summary reads; everything else passes through."""
    model_config = ConfigDict(extra='allow')

    total_cost: Price = 0
    meal_type: Optional[StrictStr] = None
