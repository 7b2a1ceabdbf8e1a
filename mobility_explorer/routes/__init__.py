"""
API routes for the Mobility Explorer
"""

from .eligibility import router as eligibility_router
from .explorer import router as explorer_router
from .rules import router as rules_router

__all__ = [
    "eligibility_router",
    "explorer_router",
    "rules_router"
]
