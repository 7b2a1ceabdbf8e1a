"""
API routes backing the map explorer UI
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from .eligibility import filter_params
from ..models.eligibility import FilterInput
from ..models.explorer import LegendEntry, MapView, PersonaOption, RegionPreset
from ..presets import DEFAULT_REGION, LEGEND, PERSONAS, region_presets
from ..services.explorer_service import explorer_service

router = APIRouter(prefix="/explorer", tags=["explorer"])


@router.get("/personas", response_model=List[PersonaOption])
async def get_personas():
    return PERSONAS


@router.get("/regions", response_model=List[RegionPreset])
async def get_regions():
    return region_presets()


@router.get("/legend", response_model=List[LegendEntry])
async def get_legend():
    return LEGEND


@router.get("/map", response_model=MapView)
async def get_map_view(
    filters: FilterInput = Depends(filter_params),
    region: str = Query(DEFAULT_REGION, description="Region preset to fly to"),
    selected: Optional[str] = Query(None, description="Country shown in the detail panel"),
    hovered: Optional[str] = Query(None, description="Country under the pointer")
):
    """
    Colors for every country plus the detail panel of the selected one
    """
    try:
        return explorer_service.map_view(
            filters, region=region, selected=selected, hovered=hovered
        )
        
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to build map view: {str(e)}"
        )
