"""
Pydantic models for personas and visa rules
"""
from enum import Enum
from typing import Any, Optional, Tuple
from pydantic import BaseModel, Field, field_validator, ConfigDict

from ..utils.validators import coerce_threshold


class Persona(str, Enum):
    """User life situation used to filter visa programs"""
    RETIREE = "retiree"
    DIGITAL_NOMAD = "digital_nomad"
    REMOTE_WORKER = "remote_worker"
    SECOND_HOME = "second_home"


class VisaRule(BaseModel):
    """One named visa or residency pathway with eligibility thresholds"""
    label: str = Field(..., min_length=1, description="Display name of the visa")
    categories: Tuple[str, ...] = Field(default=(), description="Persona tags, lower-cased")
    min_age: Optional[int] = Field(None, description="Minimum applicant age")
    min_income_usd: Optional[int] = Field(None, description="Minimum annual income in USD")
    notes: Optional[str] = Field(None, description="Free-form remarks")
    
    @field_validator('categories', mode='before')
    @classmethod
    def validate_categories(cls, v: Any):
        if v is None:
            return ()
        if not isinstance(v, (list, tuple)):
            raise ValueError("categories must be a list of strings")
        for category in v:
            if not isinstance(category, str):
                raise ValueError(f"category must be a string, got {category!r}")
        return tuple(category.strip().lower() for category in v)
    
    @field_validator('min_age', 'min_income_usd', mode='before')
    @classmethod
    def validate_threshold(cls, v: Any):
        return coerce_threshold(v)
    
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "label": "Non-Lucrative Visa",
                "categories": ["retiree"],
                "min_income_usd": 30000,
                "notes": "Passive income only; no local employment."
            }
        }
    )


class CountryRules(BaseModel):
    """All visa rules published for one canonical country name"""
    country_name: str = Field(..., description="Canonical country name")
    visas: Tuple[VisaRule, ...] = Field(default=(), description="Visa rules in document order")
    
    model_config = ConfigDict(frozen=True)
