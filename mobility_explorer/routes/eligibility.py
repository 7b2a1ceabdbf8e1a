"""
API routes for eligibility checking
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from ..models.eligibility import (
    CountryEligibility,
    EligibilityCheckRequest,
    EligibilityCheckResponse,
    FilterInput
)
from ..services.explorer_service import explorer_service
from ..utils.validators import AGE_RANGE, INCOME_RANGE, validate_filter_data

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


def filter_params(
    persona: str = Query("retiree", description="Persona tag"),
    age: int = Query(37, ge=AGE_RANGE[0], le=AGE_RANGE[1], description="Applicant age"),
    income: int = Query(
        50000, ge=INCOME_RANGE[0], le=INCOME_RANGE[1], description="Annual income in USD"
    )
) -> FilterInput:
    """Build filter input from query parameters"""
    validation_errors = validate_filter_data(
        {"persona": persona, "age": age, "income_usd": income}
    )
    if validation_errors:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid filter data: {'; '.join(validation_errors)}"
        )
    return FilterInput(persona=persona, age=age, income_usd=income)


@router.get("/countries", response_model=EligibilityCheckResponse)
async def get_all_countries(filters: FilterInput = Depends(filter_params)):
    """
    Eligibility of every country on the map
    """
    try:
        return explorer_service.check(EligibilityCheckRequest(filters=filters))
        
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to check eligibility: {str(e)}"
        )


@router.get("/countries/{country_name}", response_model=CountryEligibility)
async def get_country(country_name: str, filters: FilterInput = Depends(filter_params)):
    """
    Eligibility of a single country
    """
    try:
        return explorer_service.country(filters, country_name)
        
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to check eligibility for {country_name}: {str(e)}"
        )


@router.post("/check", response_model=EligibilityCheckResponse)
async def check_eligibility(request: EligibilityCheckRequest):
    """
    Check filters against specific countries, or all countries when none are given
    """
    try:
        validation_errors = validate_filter_data(request.filters.model_dump())
        if validation_errors:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid filter data: {'; '.join(validation_errors)}"
            )
        
        return explorer_service.check(request)
        
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to check eligibility: {str(e)}"
        )
