"""
Explorer session state

Holds everything one user's map session owns: the sidebar filters, the
region and map position, and the hovered and selected countries. Nothing
here is shared between sessions; the eligibility engine is called with
the session's filters and the loaded tables passed in explicitly.
"""
from typing import Dict, Optional, Tuple

from .eligibility import GeometrySet, RulesTable, evaluate_filters
from .models.eligibility import EligibilityResult, EligibilityStatus, FilterInput
from .models.explorer import CountryShade, DetailPanel, MapPosition, MapView
from .models.visa import VisaRule
from .presets import (
    DEFAULT_REGION,
    LEGEND,
    MAX_ZOOM,
    MIN_ZOOM,
    MISSING_COLOR,
    REGIONS,
    STATUS_COLORS,
    region_position
)
from .utils.names import normalize_country_name

NO_MATCH_MESSAGE = "No matching visa in demo for current filters."


def describe_match(rule: VisaRule) -> str:
    """One-line summary of a matching visa for the detail panel"""
    parts = [rule.label]
    if rule.min_age:
        parts.append(f"min age {rule.min_age}")
    if rule.min_income_usd:
        parts.append(f"min income ${rule.min_income_usd:,}")
    line = " - ".join(parts)
    if rule.notes:
        line = f"{line} ({rule.notes})"
    return line


class ExplorerSession:
    """State of one interactive explorer session"""
    
    def __init__(self, filters: Optional[FilterInput] = None, region: str = DEFAULT_REGION):
        self.filters = filters or FilterInput()
        self.region = DEFAULT_REGION
        self.position = region_position(DEFAULT_REGION)
        self.hovered = ""
        self.selected: Optional[str] = None
        self.set_region(region)
    
    def set_filters(
        self,
        persona: Optional[str] = None,
        age: Optional[int] = None,
        income_usd: Optional[int] = None
    ) -> FilterInput:
        """Update any subset of the filters; raises ValidationError on out-of-range values"""
        data = self.filters.model_dump()
        if persona is not None:
            data["persona"] = persona
        if age is not None:
            data["age"] = age
        if income_usd is not None:
            data["income_usd"] = income_usd
        self.filters = FilterInput(**data)
        return self.filters
    
    def set_region(self, region: Optional[str]) -> MapPosition:
        """Fly to a region preset; unknown regions show the whole world"""
        self.region = region if region in REGIONS else DEFAULT_REGION
        self.position = region_position(self.region)
        return self.position
    
    def move_to(self, center: Tuple[float, float], zoom: float) -> MapPosition:
        zoom = min(max(zoom, MIN_ZOOM), MAX_ZOOM)
        self.position = MapPosition(center=center, zoom=zoom)
        return self.position
    
    def hover(self, country_name: Optional[str]) -> str:
        self.hovered = normalize_country_name(country_name)
        return self.hovered
    
    def select(self, country_name: Optional[str]) -> Optional[str]:
        self.selected = normalize_country_name(country_name) or None
        return self.selected
    
    def evaluate(
        self,
        rules: Optional[RulesTable],
        geometry: Optional[GeometrySet]
    ) -> Dict[str, EligibilityResult]:
        return evaluate_filters(self.filters, rules, geometry)
    
    @staticmethod
    def color_for(country_name: str, results: Dict[str, EligibilityResult]) -> str:
        result = results.get(normalize_country_name(country_name))
        if result is None:
            return MISSING_COLOR
        return STATUS_COLORS[result.status]
    
    def detail_panel(self, results: Dict[str, EligibilityResult]) -> Optional[DetailPanel]:
        """Sidebar content for the selected country, or None if nothing is selected"""
        if not self.selected:
            return None
        
        result = results.get(self.selected)
        status = result.status if result else EligibilityStatus.UNKNOWN
        matches = list(result.matches) if result else []
        
        return DetailPanel(
            country_name=self.selected,
            status=status,
            matches=matches,
            lines=[describe_match(rule) for rule in matches],
            message=None if matches else NO_MATCH_MESSAGE
        )
    
    def map_view(
        self,
        results: Dict[str, EligibilityResult],
        data_loaded: Optional[Dict[str, bool]] = None
    ) -> MapView:
        countries = [
            CountryShade(
                country_name=name,
                status=result.status,
                color=self.color_for(name, results)
            )
            for name, result in sorted(results.items())
        ]
        return MapView(
            filters=self.filters,
            region=self.region,
            position=self.position,
            countries=countries,
            legend=LEGEND,
            hovered=self.hovered or None,
            selected=self.detail_panel(results),
            data_loaded=data_loaded or {}
        )
