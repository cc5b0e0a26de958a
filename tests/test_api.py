"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from api.index import app, get_cache, get_settings, get_source
from shot_card.cache import ResolutionCache
from shot_card.config import Settings
from shot_card.sources import StaticRecordSource

RECORDS = {
    "Shots": [{"id": "s1", "Coffee Bag": ["B1"], "Start time": "2024-01-03"}],
    "Coffee Bags": [{"id": "B1", "Name": "Ethiopia", "Roaster": ["R1"]}],
    "Roasters": [{"id": "R1", "ID": "BB", "Name": "Blue Bottle"}],
}


class BrokenSource(StaticRecordSource):
    async def fetch_records(self, table_name):
        raise RuntimeError("airtable down")


@pytest.fixture
def client():
    source = StaticRecordSource(RECORDS)
    cache = ResolutionCache(source)
    app.dependency_overrides[get_settings] = lambda: Settings(font_path=None)
    app.dependency_overrides[get_source] = lambda: source
    app.dependency_overrides[get_cache] = lambda: cache
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_og_image_returns_png(client):
    response = client.get("/og-image.png")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["cache-control"] == "public, max-age=3600, s-maxage=86400"
    assert response.content.startswith(b"\x89PNG")


def test_og_image_render_failure_returns_500(client, mocker):
    mocker.patch("api.index.render_card", side_effect=RuntimeError("boom"))

    response = client.get("/og-image.png")

    assert response.status_code == 500
    assert response.text == "Error generating image"
    assert response.headers["content-type"].startswith("text/plain")


def test_og_image_with_failing_source_still_renders(client):
    source = BrokenSource()
    app.dependency_overrides[get_source] = lambda: source
    app.dependency_overrides[get_cache] = lambda: ResolutionCache(source)

    response = client.get("/og-image.png")

    assert response.status_code == 200
    assert response.content.startswith(b"\x89PNG")


def test_debug_roasters(client):
    response = client.get("/debug-roasters.json")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.text.startswith('{\n  "shots": {')
    payload = response.json()
    assert payload["shots"]["total"] == 1
    assert payload["coffeeBags"]["sample"][0]["roaster"] == ["R1"]
    assert payload["roasters"]["sample"][0]["ID"] == "BB"


def test_debug_roasters_failure_returns_500(client):
    app.dependency_overrides[get_source] = lambda: BrokenSource()

    response = client.get("/debug-roasters.json")

    assert response.status_code == 500
    assert response.json() == {"error": "airtable down"}
