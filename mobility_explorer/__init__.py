"""
Mobility Explorer

Explore which countries offer a residency or visa pathway for a persona
(retiree, digital nomad, remote worker, second-home buyer) given age and
income thresholds.
"""

__version__ = "1.0.0"
__author__ = "Mobility Explorer Team"
__description__ = "Persona-based visa eligibility over a world map (demo data)"
