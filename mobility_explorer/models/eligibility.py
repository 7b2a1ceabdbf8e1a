"""
Pydantic models for filter input and eligibility results
"""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .visa import Persona, VisaRule
from ..utils.validators import normalize_persona


def get_current_utc_time():
    """Get current UTC time for default values"""
    return datetime.now(timezone.utc)


class EligibilityStatus(str, Enum):
    """Per-country classification"""
    UNKNOWN = "unknown"
    ELIGIBLE = "eligible"
    INELIGIBLE = "ineligible"


class FilterInput(BaseModel):
    """Persona, age and income chosen in the filter sidebar"""
    persona: str = Field(default=Persona.RETIREE.value, description="Persona tag")
    age: int = Field(default=37, ge=18, le=85, description="Applicant age")
    income_usd: int = Field(default=50000, ge=0, le=200000, description="Annual income in USD")
    
    @field_validator('persona', mode='before')
    @classmethod
    def validate_persona(cls, v):
        # Unknown personas are allowed; they simply match no rule
        return normalize_persona(v)
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "persona": "retiree",
                "age": 55,
                "income_usd": 30000
            }
        }
    )


class EligibilityResult(BaseModel):
    """Eligibility of one country for the current filters"""
    status: EligibilityStatus = Field(..., description="unknown, eligible or ineligible")
    matches: List[VisaRule] = Field(default_factory=list, description="Matching rules in original order")


class CountryEligibility(BaseModel):
    """Eligibility result tagged with its country"""
    country_name: str = Field(..., description="Canonical country name")
    status: EligibilityStatus
    matches: List[VisaRule] = Field(default_factory=list)


class EligibilityCheckRequest(BaseModel):
    """Request to evaluate filters against some or all countries"""
    filters: FilterInput = Field(default_factory=FilterInput)
    countries: Optional[List[str]] = Field(
        None, description="Specific countries to check (if None, every country on the map)"
    )


class EligibilityCheckResponse(BaseModel):
    """Eligibility of a set of countries for one filter input"""
    filters: FilterInput
    total_countries: int = Field(..., description="Number of countries evaluated")
    eligible_countries: int = Field(..., description="Number of countries with at least one match")
    results: List[CountryEligibility] = Field(default_factory=list)
    data_revision: int = Field(0, description="Revision of the loaded rules and geometry")
    checked_at: datetime = Field(default_factory=get_current_utc_time)
