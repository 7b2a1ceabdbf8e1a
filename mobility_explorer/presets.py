"""
Fixed UI vocabulary: personas, region presets and status colors
"""
from typing import Dict, List, Tuple

from .models.eligibility import EligibilityStatus
from .models.explorer import LegendEntry, MapPosition, PersonaOption, RegionPreset
from .models.visa import Persona

PERSONAS: List[PersonaOption] = [
    PersonaOption(id=Persona.RETIREE.value, label="Retiree"),
    PersonaOption(id=Persona.DIGITAL_NOMAD.value, label="Digital Nomad"),
    PersonaOption(id=Persona.REMOTE_WORKER.value, label="Remote Worker"),
    PersonaOption(id=Persona.SECOND_HOME.value, label="Second Home"),
]

DEFAULT_REGION = "World"

# center is (longitude, latitude)
REGIONS: Dict[str, Tuple[Tuple[float, float], float]] = {
    "World": ((0, 20), 1),
    "North America": ((-100, 40), 2),
    "Central America": ((-90, 15), 3),
    "South America": ((-60, -15), 2),
    "Europe": ((15, 50), 2.5),
    "SE Asia": ((105, 10), 3),
    "E Asia": ((110, 30), 2.8),
    "Africa": ((20, 0), 2.2),
    "Middle East": ((45, 25), 3),
}

MIN_ZOOM = 1.0
MAX_ZOOM = 8.0

STATUS_COLORS: Dict[EligibilityStatus, str] = {
    EligibilityStatus.ELIGIBLE: "#4CAF50",
    EligibilityStatus.INELIGIBLE: "#D6D6DA",
    EligibilityStatus.UNKNOWN: "#ECECEC",
}
# Countries with no computed result at all
MISSING_COLOR = "#EEE"

LEGEND: List[LegendEntry] = [
    LegendEntry(status=EligibilityStatus.ELIGIBLE, color=STATUS_COLORS[EligibilityStatus.ELIGIBLE],
                label="Eligible"),
    LegendEntry(status=EligibilityStatus.INELIGIBLE, color=STATUS_COLORS[EligibilityStatus.INELIGIBLE],
                label="Not eligible (per demo rules)"),
    LegendEntry(status=EligibilityStatus.UNKNOWN, color=STATUS_COLORS[EligibilityStatus.UNKNOWN],
                label="No data yet"),
]


def region_position(region: str) -> MapPosition:
    """Map position for a region preset, falling back to the world view"""
    center, zoom = REGIONS.get(region, REGIONS[DEFAULT_REGION])
    return MapPosition(center=center, zoom=zoom)


def region_presets() -> List[RegionPreset]:
    return [RegionPreset(name=name, position=region_position(name)) for name in REGIONS]
