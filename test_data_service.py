"""
Tests for loading rules and geometry
"""
import asyncio
import json

import httpx

from mobility_explorer.services.data_service import DataStore, load_document

RULES_URL = "https://data.example.test/visa_rules.json"
WORLD_URL = "https://data.example.test/world-110m.json"


def mock_client(routes):
    def handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) in routes:
            return routes[str(request.url)]
        return httpx.Response(404)
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_load_from_urls(rules_document, world_document):
    async def run():
        async with mock_client({
            RULES_URL: httpx.Response(200, json=rules_document),
            WORLD_URL: httpx.Response(200, json=world_document)
        }) as client:
            store = DataStore()
            outcome = await store.load(RULES_URL, WORLD_URL, client=client)
            return store, outcome
    
    store, outcome = asyncio.run(run())
    
    assert outcome == {"rules": True, "geometry": True}
    assert store.loaded == {"rules": True, "geometry": True}
    assert "Vietnam" in store.geometry
    assert store.rules["Thailand"].visas[0].min_age == 50
    assert store.errors == {}


def test_failed_load_keeps_previous_table(rules_document):
    async def run():
        store = DataStore()
        async with mock_client({RULES_URL: httpx.Response(200, json=rules_document)}) as client:
            await store.load_rules(RULES_URL, client)
        revision = store.revision
        async with mock_client({RULES_URL: httpx.Response(500)}) as client:
            ok = await store.load_rules(RULES_URL, client)
        return store, ok, revision
    
    store, ok, revision = asyncio.run(run())
    
    assert not ok
    assert store.revision == revision
    assert "Spain" in store.rules
    assert "rules" in store.errors


def test_invalid_json_is_reported_not_raised():
    async def run():
        store = DataStore()
        async with mock_client({WORLD_URL: httpx.Response(200, text="<html>")}) as client:
            ok = await store.load_geometry(WORLD_URL, client)
        return store, ok
    
    store, ok = asyncio.run(run())
    
    assert not ok
    assert store.geometry is None
    assert store.loaded == {"rules": False, "geometry": False}


def test_load_from_local_files(tmp_path, rules_document, world_document):
    rules_path = tmp_path / "visa_rules.json"
    world_path = tmp_path / "world.json"
    rules_path.write_text(json.dumps(rules_document), encoding="utf-8")
    world_path.write_text(json.dumps(world_document), encoding="utf-8")
    
    store = DataStore()
    outcome = asyncio.run(store.load(str(rules_path), str(world_path)))
    
    assert outcome == {"rules": True, "geometry": True}
    assert len(store.rules) == 4
    assert len(store.geometry) == 5


def test_missing_local_file(tmp_path):
    store = DataStore()
    ok = asyncio.run(store.load_rules(str(tmp_path / "missing.json")))
    
    assert not ok
    assert store.rules is None


def test_packaged_rules_document_parses():
    from mobility_explorer.config import DEFAULT_RULES_PATH
    
    document = asyncio.run(load_document(str(DEFAULT_RULES_PATH)))
    store = DataStore()
    asyncio.run(store.load_rules(str(DEFAULT_RULES_PATH)))
    
    assert len(store.rules) == len(document)
    for country_rules in store.rules.values():
        assert len(country_rules.visas) == len(document[country_rules.country_name]["visas"])


def test_malformed_geometry_file_loads_without_raising(tmp_path):
    bad_properties = tmp_path / "bad_properties.json"
    bad_properties.write_text(json.dumps({
        "type": "FeatureCollection",
        "features": [{"properties": "Spain"}, {"properties": ["x"]}]
    }), encoding="utf-8")
    bad_features = tmp_path / "bad_features.json"
    bad_features.write_text(json.dumps({"type": "FeatureCollection", "features": 5}), encoding="utf-8")
    
    store = DataStore()
    assert asyncio.run(store.load_geometry(str(bad_properties)))
    assert store.geometry == {}
    assert asyncio.run(store.load_geometry(str(bad_features)))
    assert store.geometry == {}
