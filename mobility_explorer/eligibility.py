"""
Eligibility engine: matches a persona, age and income against the visa
rules of each country. Every function here is pure and never raises for
bad data; a rule that cannot be evaluated simply does not match.
"""
import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Union

from .models.eligibility import EligibilityResult, EligibilityStatus, FilterInput
from .models.visa import CountryRules, Persona, VisaRule
from .utils.names import normalize_country_name

logger = logging.getLogger(__name__)

# Categories a retiree below a rule's minimum age may qualify through
FALLBACK_CATEGORIES_WHEN_TOO_YOUNG: FrozenSet[str] = frozenset({
    "second_home",
    "investor",
    "remote_worker",
})

RulesTable = Mapping[str, CountryRules]
GeometrySet = Mapping[str, Any]


def _persona_tag(persona: Union[Persona, str, None]) -> str:
    if isinstance(persona, Persona):
        return persona.value
    if isinstance(persona, str):
        return persona
    return ""


def meets_min_age(age: int, rule: VisaRule) -> bool:
    return rule.min_age is None or age >= rule.min_age


def meets_min_income(income_usd: int, rule: VisaRule) -> bool:
    return rule.min_income_usd is None or income_usd >= rule.min_income_usd


def too_young_retiree_fallback(persona: str, categories: FrozenSet[str], age_ok: bool) -> bool:
    """
    A retiree under a rule's minimum age may still take a visa tagged for
    second-home buyers, investors or remote workers. Only the age limit is
    waived; the income requirement still applies.
    """
    if age_ok:
        return False
    return persona == Persona.RETIREE.value and not categories.isdisjoint(
        FALLBACK_CATEGORIES_WHEN_TOO_YOUNG
    )


def rule_matches(persona: Union[Persona, str], age: int, income_usd: int, rule: VisaRule) -> bool:
    """
    Decide whether a single visa rule applies to the user

    Decision table, first matching row wins:

        persona tagged on rule          -> age ok and income ok
        too-young retiree fallback      -> income ok
        otherwise                       -> no match

    Args:
        persona: Persona tag chosen by the user
        age: User's age in years
        income_usd: User's annual income in USD
        rule: Visa rule to evaluate

    Returns:
        True if the rule should be offered, False otherwise
    """
    try:
        tag = _persona_tag(persona)
        categories = frozenset(category.lower() for category in rule.categories)
        age_ok = meets_min_age(age, rule)
        income_ok = meets_min_income(income_usd, rule)

        if tag in categories:
            return age_ok and income_ok
        if too_young_retiree_fallback(tag, categories, age_ok):
            return income_ok
        return False

    except Exception as e:
        logger.warning(f"Skipping visa rule {getattr(rule, 'label', rule)!r}: {e}")
        return False


def match_visas(
    persona: Union[Persona, str],
    age: int,
    income_usd: int,
    visas: Iterable[VisaRule]
) -> List[VisaRule]:
    """Return the rules the user qualifies for, in their original order"""
    return [rule for rule in visas if rule_matches(persona, age, income_usd, rule)]


def evaluate_country(
    persona: Union[Persona, str],
    age: int,
    income_usd: int,
    rules: Optional[RulesTable],
    country_name: Optional[str]
) -> EligibilityResult:
    """
    Classify one country for the given filters

    A country without a rules entry (or a rules table that has not been
    loaded yet) is always unknown, never ineligible.
    """
    name = normalize_country_name(country_name)
    country_rules = rules.get(name) if rules else None

    if country_rules is None:
        return EligibilityResult(status=EligibilityStatus.UNKNOWN, matches=[])

    matches = match_visas(persona, age, income_usd, country_rules.visas)
    if matches:
        return EligibilityResult(status=EligibilityStatus.ELIGIBLE, matches=matches)
    return EligibilityResult(status=EligibilityStatus.INELIGIBLE, matches=[])


def evaluate_countries(
    persona: Union[Persona, str],
    age: int,
    income_usd: int,
    rules: Optional[RulesTable],
    geometry: Optional[GeometrySet]
) -> Dict[str, EligibilityResult]:
    """
    Classify every country of the geometry set

    Returns:
        One result per normalized country name; empty if geometry is not loaded
    """
    results: Dict[str, EligibilityResult] = {}
    for country_name in geometry or {}:
        name = normalize_country_name(country_name)
        results[name] = evaluate_country(persona, age, income_usd, rules, name)
    return results


def evaluate_filters(
    filters: FilterInput,
    rules: Optional[RulesTable],
    geometry: Optional[GeometrySet]
) -> Dict[str, EligibilityResult]:
    return evaluate_countries(filters.persona, filters.age, filters.income_usd, rules, geometry)
