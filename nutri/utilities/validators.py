"""
Input validation schemas using Pydantic for the HTTP layer.

Only the request shape is validated here. Estimation itself stays lenient:
unknown units, unmatched items and servings <= 0 are accepted.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union

from nutri.domain.RecipeLine import RecipeLine


class RecipeLineInput(BaseModel):
    """Schema for one ingredient row. qty may be a number, a numeric string or empty."""
    qty: Optional[Union[float, str]] = None
    unit: str = Field(default="", max_length=40)
    item: str = Field(default="", max_length=200)

    @field_validator('unit', 'item', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    def to_line(self) -> RecipeLine:
        return RecipeLine.from_dict(self.model_dump())


class EstimateRequest(BaseModel):
    """Schema for a nutrition estimate request."""
    lines: List[RecipeLineInput] = Field(default_factory=list, max_length=500)
    servings: float = Field(default=1, allow_inf_nan=False)

    @field_validator('servings', mode='before')
    @classmethod
    def default_servings(cls, v):
        """Missing/blank servings means one serving. NaN and infinity are rejected."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return 1
        return v


class AnalyzeTextRequest(BaseModel):
    """Schema for analyzing a pasted plain-text recipe."""
    text: str = Field(..., min_length=1, max_length=50000)

    @field_validator('text')
    @classmethod
    def validate_text(cls, v):
        if not v.strip():
            raise ValueError('Recipe text cannot be empty')
        return v
