"""
Models package for the Mobility Explorer
"""

from .visa import (
    Persona,
    VisaRule,
    CountryRules
)

from .eligibility import (
    EligibilityStatus,
    FilterInput,
    EligibilityResult,
    CountryEligibility,
    EligibilityCheckRequest,
    EligibilityCheckResponse
)

from .explorer import (
    PersonaOption,
    MapPosition,
    RegionPreset,
    LegendEntry,
    CountryShade,
    DetailPanel,
    MapView
)

__all__ = [
    # Visa models
    "Persona",
    "VisaRule",
    "CountryRules",
    
    # Eligibility models
    "EligibilityStatus",
    "FilterInput",
    "EligibilityResult",
    "CountryEligibility",
    "EligibilityCheckRequest",
    "EligibilityCheckResponse",
    
    # Explorer models
    "PersonaOption",
    "MapPosition",
    "RegionPreset",
    "LegendEntry",
    "CountryShade",
    "DetailPanel",
    "MapView"
]
