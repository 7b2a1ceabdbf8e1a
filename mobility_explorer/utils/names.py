"""
Country name normalization shared by the engine, the loaders and the API
"""
from typing import Dict, Optional


# Alternate spellings found in geometry files or rules documents
NAME_ALIASES: Dict[str, str] = {
    "Viet Nam": "Vietnam",
}


def normalize_country_name(name: Optional[str]) -> str:
    """
    Map a country name to its canonical key
    
    Args:
        name: Country name as spelled by the source (may be None)
    
    Returns:
        Canonical country name used for every table lookup
    """
    if not name:
        return ""
    
    name = str(name).strip()
    return NAME_ALIASES.get(name, name)
