"""
Parser for the static visa rules document

Expected shape:

    {
      "<Country>": {
        "visas": [
          {"label": ..., "categories": [...], "min_age": 50, "min_income_usd": 24000, "notes": ...}
        ]
      }
    }

Bad records are logged and skipped one at a time so that a single broken
entry never hides an otherwise valid country.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .models.visa import CountryRules, VisaRule
from .utils.names import normalize_country_name

logger = logging.getLogger(__name__)


def parse_visa_rule(raw: Any, country_name: str = "", index: int = 0) -> Optional[VisaRule]:
    """Parse one visa entry, returning None if it is malformed"""
    if not isinstance(raw, dict):
        logger.warning(f"{country_name}.visas[{index}] is not an object; skipping")
        return None

    try:
        return VisaRule.model_validate(raw)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        logger.warning(f"{country_name}.visas[{index}] is invalid ({errors}); skipping")
        return None


def parse_visas(raw_visas: Any, country_name: str = "") -> List[VisaRule]:
    """Parse a country's visa list, dropping malformed entries"""
    if not isinstance(raw_visas, list):
        logger.warning(f"{country_name}.visas must be a list; treating as empty")
        return []

    visas = []
    for index, raw in enumerate(raw_visas):
        rule = parse_visa_rule(raw, country_name, index)
        if rule is not None:
            visas.append(rule)
    return visas


def parse_rules_table(document: Any) -> Dict[str, CountryRules]:
    """
    Build the country-keyed rules table from a JSON-like document

    Args:
        document: Decoded rules document

    Returns:
        Mapping from canonical country name to CountryRules
    """
    if not isinstance(document, dict):
        logger.error(f"Rules document must be an object, got {type(document).__name__}")
        return {}

    table: Dict[str, CountryRules] = {}
    for raw_name, entry in document.items():
        name = normalize_country_name(raw_name)
        if not name:
            logger.warning("Rules entry with an empty country name; skipping")
            continue

        raw_visas = entry.get("visas") if isinstance(entry, dict) else None
        visas = parse_visas(raw_visas, name)

        if name in table:
            logger.info(f"Merging rules for '{raw_name}' into '{name}'")
            visas = list(table[name].visas) + visas

        table[name] = CountryRules(country_name=name, visas=tuple(visas))

    logger.info(f"Parsed visa rules for {len(table)} countries")
    return table
