"""
Utility functions for the Mobility Explorer
"""

from .names import NAME_ALIASES, normalize_country_name
from .validators import (
    AGE_RANGE,
    INCOME_RANGE,
    coerce_threshold,
    normalize_persona,
    validate_filter_data
)

__all__ = [
    "NAME_ALIASES",
    "normalize_country_name",
    "AGE_RANGE",
    "INCOME_RANGE",
    "coerce_threshold",
    "normalize_persona",
    "validate_filter_data"
]
