"""
Country shapes from a TopoJSON topology or a GeoJSON feature collection

Only the country names are read; shapes are passed through untouched.
"""
import logging
from typing import Any, Dict, Iterable

from .utils.names import normalize_country_name

logger = logging.getLogger(__name__)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _iter_features(document: Dict[str, Any]) -> Iterable[Any]:
    doc_type = document.get("type")

    if doc_type == "Topology":
        countries = _as_dict(_as_dict(document.get("objects")).get("countries"))
        features = countries.get("geometries")
    elif doc_type == "FeatureCollection":
        features = document.get("features")
    else:
        logger.error(f"Unsupported geometry document type: {doc_type!r}")
        return []

    if features is None:
        return []
    if not isinstance(features, list):
        logger.error(f"{doc_type} features must be a list, got {type(features).__name__}")
        return []
    return features


def extract_country_shapes(document: Any) -> Dict[str, Any]:
    """
    Map normalized country names to their shapes

    Args:
        document: Decoded TopoJSON or GeoJSON document

    Returns:
        Mapping from canonical country name to the raw feature
    """
    if not isinstance(document, dict):
        logger.error("Geometry document must be an object")
        return {}

    shapes: Dict[str, Any] = {}
    skipped = 0
    for feature in _iter_features(document):
        properties = _as_dict(feature.get("properties")) if isinstance(feature, dict) else {}
        name = normalize_country_name(properties.get("name"))
        if not name:
            skipped += 1
            continue
        shapes[name] = feature

    if skipped:
        logger.warning(f"Skipped {skipped} malformed or unnamed geometry features")
    logger.info(f"Extracted {len(shapes)} country shapes")
    return shapes
