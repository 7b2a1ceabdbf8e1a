"""
Shared fixtures for the Mobility Explorer tests
"""
import pytest

from mobility_explorer.geometry import extract_country_shapes
from mobility_explorer.rules_table import parse_rules_table
from mobility_explorer.services.data_service import data_store
from mobility_explorer.services.explorer_service import explorer_service


@pytest.fixture
def rules_document():
    return {
        "Spain": {
            "visas": [
                {"label": "Non-Lucrative Visa", "categories": ["retiree"], "min_income_usd": 30000},
                {"label": "Digital Nomad Visa", "categories": ["Digital_Nomad"], "min_income_usd": 34000}
            ]
        },
        "Thailand": {
            "visas": [
                {"label": "Retirement Visa", "categories": ["retiree"], "min_age": 50, "min_income_usd": 24000}
            ]
        },
        "Japan": {
            "visas": [
                {"label": "LTR", "categories": ["remote_worker"], "min_age": 50, "min_income_usd": 80000}
            ]
        },
        "Vietnam": {
            "visas": [
                {"label": "E-Visa", "categories": ["digital_nomad"]}
            ]
        }
    }


@pytest.fixture
def world_document():
    return {
        "type": "Topology",
        "objects": {
            "countries": {
                "type": "GeometryCollection",
                "geometries": [
                    {"type": "Polygon", "arcs": [[0]], "properties": {"name": "Spain"}},
                    {"type": "Polygon", "arcs": [[1]], "properties": {"name": "Thailand"}},
                    {"type": "Polygon", "arcs": [[2]], "properties": {"name": "Japan"}},
                    {"type": "Polygon", "arcs": [[3]], "properties": {"name": "Viet Nam"}},
                    {"type": "Polygon", "arcs": [[4]], "properties": {"name": "Atlantis"}}
                ]
            }
        },
        "arcs": []
    }


@pytest.fixture
def rules_table(rules_document):
    return parse_rules_table(rules_document)


@pytest.fixture
def geometry(world_document):
    return extract_country_shapes(world_document)


@pytest.fixture
def loaded_store(rules_table, geometry):
    """Populate the global data store for API tests and reset it afterwards"""
    data_store.set_rules(rules_table)
    data_store.set_geometry(geometry)
    yield data_store
    data_store.clear()
    explorer_service.clear_cache()
