"""
Tests for explorer session state
"""
import pytest
from pydantic import ValidationError

from mobility_explorer.models.eligibility import EligibilityStatus, FilterInput
from mobility_explorer.presets import MISSING_COLOR, STATUS_COLORS
from mobility_explorer.session import NO_MATCH_MESSAGE, ExplorerSession, describe_match


def test_defaults():
    session = ExplorerSession()
    
    assert session.filters == FilterInput(persona="retiree", age=37, income_usd=50000)
    assert session.region == "World"
    assert session.position.center == (0, 20)
    assert session.position.zoom == 1
    assert session.selected is None


def test_set_filters_updates_only_given_fields():
    session = ExplorerSession()
    session.set_filters(persona="Digital_Nomad", income_usd=90000)
    
    assert session.filters.persona == "digital_nomad"
    assert session.filters.age == 37
    assert session.filters.income_usd == 90000
    
    with pytest.raises(ValidationError):
        session.set_filters(age=17)
    with pytest.raises(ValidationError):
        session.set_filters(income_usd=200001)


def test_region_presets_and_fallback():
    session = ExplorerSession(region="SE Asia")
    assert session.position.center == (105, 10)
    assert session.position.zoom == 3
    
    session.set_region("Atlantis")
    assert session.region == "World"
    assert session.position.center == (0, 20)


def test_move_to_clamps_zoom():
    session = ExplorerSession()
    
    assert session.move_to((10, 10), 20).zoom == 8
    assert session.move_to((10, 10), 0.2).zoom == 1
    assert session.move_to((10, 10), 4).center == (10, 10)


def test_selection_uses_canonical_name(rules_table, geometry):
    session = ExplorerSession(FilterInput(persona="digital_nomad", age=30, income_usd=0))
    session.select("Viet Nam")
    session.hover("Viet Nam")
    results = session.evaluate(rules_table, geometry)
    
    panel = session.detail_panel(results)
    assert session.hovered == "Vietnam"
    assert panel.country_name == "Vietnam"
    assert panel.status == EligibilityStatus.ELIGIBLE
    assert [m.label for m in panel.matches] == ["E-Visa"]
    assert panel.message is None


def test_detail_panel_without_matches(rules_table, geometry):
    session = ExplorerSession(FilterInput(persona="retiree", age=40, income_usd=30000))
    results = session.evaluate(rules_table, geometry)
    
    assert session.detail_panel(results) is None
    
    session.select("Thailand")
    panel = session.detail_panel(results)
    assert panel.status == EligibilityStatus.INELIGIBLE
    assert panel.matches == []
    assert panel.message == NO_MATCH_MESSAGE
    
    session.select("Narnia")
    assert session.detail_panel(results).status == EligibilityStatus.UNKNOWN


def test_colors(rules_table, geometry):
    session = ExplorerSession(FilterInput(persona="retiree", age=55, income_usd=30000))
    results = session.evaluate(rules_table, geometry)
    
    assert session.color_for("Spain", results) == STATUS_COLORS[EligibilityStatus.ELIGIBLE]
    assert session.color_for("Japan", results) == STATUS_COLORS[EligibilityStatus.INELIGIBLE]
    assert session.color_for("Atlantis", results) == STATUS_COLORS[EligibilityStatus.UNKNOWN]
    assert session.color_for("Narnia", results) == MISSING_COLOR


def test_describe_match(rules_table):
    rule = rules_table["Thailand"].visas[0]
    assert describe_match(rule) == "Retirement Visa - min age 50 - min income $24,000"


def test_map_view(rules_table, geometry):
    session = ExplorerSession(FilterInput(persona="retiree", age=55, income_usd=30000), region="Europe")
    session.select("Spain")
    view = session.map_view(session.evaluate(rules_table, geometry), {"rules": True, "geometry": True})
    
    assert view.region == "Europe"
    assert [c.country_name for c in view.countries] == sorted(geometry)
    assert view.selected.lines == ["Non-Lucrative Visa - min income $30,000"]
    assert len(view.legend) == 3
