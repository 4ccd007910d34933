"""
Shared pydantic building blocks.
"""

from typing import Annotated
from pydantic import BaseModel, Field, StringConstraints
from pydantic.alias_generators import to_camel

# Required text field: surrounding whitespace stripped, must not be empty
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Largest value a Numeric(10, 2) column holds
MAX_AMOUNT = 99_999_999.99

# Positive, finite money amount that fits the store
Amount = Annotated[float, Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)]


class CamelModel(BaseModel):
    """Base schema exposing snake_case attributes as camelCase JSON fields."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
