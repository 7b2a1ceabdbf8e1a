"""
Explorer service: evaluates filters against the loaded tables and builds
API responses
"""
import logging
from collections import OrderedDict
from typing import Dict, List, Optional, Tuple

from .data_service import DataStore, data_store
from ..eligibility import evaluate_filters
from ..models.eligibility import (
    CountryEligibility,
    EligibilityCheckRequest,
    EligibilityCheckResponse,
    EligibilityResult,
    EligibilityStatus,
    FilterInput
)
from ..models.explorer import MapView
from ..models.visa import CountryRules
from ..session import ExplorerSession
from ..utils.names import normalize_country_name

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, int, int, int]


class ExplorerService:
    """Service for evaluating eligibility over the loaded data"""
    
    def __init__(self, store: DataStore, cache_size: int = 128):
        self.store = store
        self.cache_size = cache_size
        self._cache: "OrderedDict[CacheKey, Dict[str, EligibilityResult]]" = OrderedDict()
    
    def results_for(self, filters: FilterInput) -> Dict[str, EligibilityResult]:
        """
        Per-country results for every country on the map
        
        Memoized on the filters and the store revision, so a data reload
        invalidates earlier results. Callers get a copy of the cached mapping.
        """
        key = (filters.persona, filters.age, filters.income_usd, self.store.revision)
        if key in self._cache:
            self._cache.move_to_end(key)
            return dict(self._cache[key])
        
        results = evaluate_filters(filters, self.store.rules, self.store.geometry)
        self._cache[key] = results
        if len(self._cache) > self.cache_size:
            self._cache.popitem(last=False)
        return dict(results)
    
    def clear_cache(self):
        self._cache.clear()
    
    def country(self, filters: FilterInput, country_name: str) -> CountryEligibility:
        """
        Eligibility of a single country as shown on the map
        
        A country missing from the loaded geometry (or any country before
        the geometry arrives) is unknown, matching the map view.
        """
        name = normalize_country_name(country_name)
        result = self.results_for(filters).get(name)
        if result is None:
            result = EligibilityResult(status=EligibilityStatus.UNKNOWN, matches=[])
        return CountryEligibility(country_name=name, status=result.status, matches=result.matches)
    
    def check(self, request: EligibilityCheckRequest) -> EligibilityCheckResponse:
        """
        Evaluate filters against the requested countries
        
        Args:
            request: Filters plus an optional list of country names
        
        Returns:
            EligibilityCheckResponse with one entry per country
        """
        filters = request.filters
        if request.countries is not None:
            results = [self.country(filters, name) for name in request.countries]
        else:
            results = [
                CountryEligibility(country_name=name, status=result.status, matches=result.matches)
                for name, result in sorted(self.results_for(filters).items())
            ]
        
        eligible_count = sum(1 for r in results if r.status == EligibilityStatus.ELIGIBLE)
        logger.info(
            f"Eligibility check for {filters.persona} age={filters.age} "
            f"income={filters.income_usd}: {eligible_count}/{len(results)} countries eligible"
        )
        
        return EligibilityCheckResponse(
            filters=filters,
            total_countries=len(results),
            eligible_countries=eligible_count,
            results=results,
            data_revision=self.store.revision
        )
    
    def map_view(
        self,
        filters: FilterInput,
        region: Optional[str] = None,
        selected: Optional[str] = None,
        hovered: Optional[str] = None
    ) -> MapView:
        """Build the full map view for a request-scoped session"""
        session = ExplorerSession(filters=filters, region=region)
        session.select(selected)
        session.hover(hovered)
        return session.map_view(self.results_for(filters), self.store.loaded)
    
    def get_rules(self) -> List[CountryRules]:
        return sorted((self.store.rules or {}).values(), key=lambda r: r.country_name)
    
    def get_country_rules(self, country_name: str) -> Optional[CountryRules]:
        return (self.store.rules or {}).get(normalize_country_name(country_name))
    
    async def reload(self) -> Dict[str, bool]:
        """Reload both tables from the configured sources"""
        outcome = await self.store.load()
        self.clear_cache()
        return outcome


# Global explorer service instance
explorer_service = ExplorerService(data_store)
