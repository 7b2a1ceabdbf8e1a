"""
Validation helpers for explorer filter input
"""
import logging
from typing import Any, List, Optional, Tuple

logger = logging.getLogger(__name__)

AGE_RANGE: Tuple[int, int] = (18, 85)
INCOME_RANGE: Tuple[int, int] = (0, 200000)


def coerce_threshold(value: Any) -> Optional[int]:
    """
    Coerce a rule threshold to an integer
    
    Returns None when the threshold is absent. Raises ValueError for
    values that cannot be read as a whole number.
    """
    if value is None:
        return None
    
    # bool is an int subclass but never a valid threshold
    if isinstance(value, bool):
        raise ValueError(f"threshold must be a number, got {value!r}")
    
    if isinstance(value, int):
        return value
    
    if isinstance(value, float) and value.is_integer():
        return int(value)
    
    if isinstance(value, str) and value.strip().isdigit():
        logger.warning(f"Coercing string threshold '{value}' to integer")
        return int(value.strip())
    
    raise ValueError(f"threshold must be a whole number, got {value!r}")


def normalize_persona(persona: Any) -> str:
    """Lower-case and trim a persona tag; unknown personas are kept as-is"""
    if persona is None:
        return ""
    if not isinstance(persona, str):
        persona = str(persona)
    return persona.strip().lower()


def validate_filter_data(filter_data: dict) -> List[str]:
    """
    Validate explorer filter data and return list of validation errors
    
    Args:
        filter_data: Dictionary containing persona, age and income_usd
    
    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    
    # Required fields
    for field in ("persona", "age", "income_usd"):
        if field not in filter_data or filter_data[field] is None:
            errors.append(f"Missing required field: {field}")
    
    if filter_data.get("age") is not None:
        try:
            age = int(filter_data["age"])
            if age < AGE_RANGE[0] or age > AGE_RANGE[1]:
                errors.append(f"Age must be between {AGE_RANGE[0]} and {AGE_RANGE[1]}")
        except (ValueError, TypeError):
            errors.append("Age must be a valid number")
    
    if filter_data.get("income_usd") is not None:
        try:
            income = int(filter_data["income_usd"])
            if income < INCOME_RANGE[0] or income > INCOME_RANGE[1]:
                errors.append(
                    f"Income must be between {INCOME_RANGE[0]} and {INCOME_RANGE[1]} USD"
                )
        except (ValueError, TypeError):
            errors.append("Income must be a valid number")
    
    if filter_data.get("persona") is not None and not str(filter_data["persona"]).strip():
        errors.append("Persona cannot be blank")
    
    return errors
