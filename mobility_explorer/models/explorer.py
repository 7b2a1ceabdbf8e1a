"""
Pydantic models describing the explorer map view
"""
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field

from .eligibility import EligibilityStatus, FilterInput
from .visa import VisaRule


class PersonaOption(BaseModel):
    id: str
    label: str


class MapPosition(BaseModel):
    """Map center as (longitude, latitude) plus zoom factor"""
    center: Tuple[float, float]
    zoom: float


class RegionPreset(BaseModel):
    name: str
    position: MapPosition


class LegendEntry(BaseModel):
    status: EligibilityStatus
    color: str
    label: str


class CountryShade(BaseModel):
    """Display color of one country on the map"""
    country_name: str
    status: EligibilityStatus
    color: str


class DetailPanel(BaseModel):
    """Side panel content for the selected country"""
    country_name: str
    status: EligibilityStatus
    matches: List[VisaRule] = Field(default_factory=list)
    lines: List[str] = Field(default_factory=list, description="Human readable match summaries")
    message: Optional[str] = Field(None, description="Shown when nothing matches")


class MapView(BaseModel):
    """Everything needed to render the map and sidebar for one session"""
    filters: FilterInput
    region: str
    position: MapPosition
    countries: List[CountryShade] = Field(default_factory=list)
    legend: List[LegendEntry] = Field(default_factory=list)
    hovered: Optional[str] = None
    selected: Optional[DetailPanel] = None
    data_loaded: Dict[str, bool] = Field(default_factory=dict)
