"""
API routes for the visa rules table
"""
from typing import List
from fastapi import APIRouter, HTTPException

from ..models.visa import CountryRules
from ..services.explorer_service import explorer_service

router = APIRouter(prefix="/rules", tags=["rules"])


@router.get("/", response_model=List[CountryRules])
async def get_rules():
    """
    Get visa rules for every country
    """
    try:
        return explorer_service.get_rules()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to retrieve rules: {str(e)}")


@router.get("/{country_name}", response_model=CountryRules)
async def get_country_rules(country_name: str):
    """
    Get visa rules for a specific country
    """
    try:
        rules = explorer_service.get_country_rules(country_name)
        
        if not rules:
            raise HTTPException(status_code=404, detail=f"Visa rules not found: {country_name}")
        
        return rules
        
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to retrieve rules: {str(e)}")
