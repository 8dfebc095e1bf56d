"""Tests for the pattern HTTP endpoints"""

import json

import pytest
from fastapi.testclient import TestClient

from gof_catalog import config
from gof_catalog.main import create_app
from gof_catalog.patterns import Category, PatternCatalog, PatternEntry, build_catalog


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(create_app(build_catalog()))


def test_list_all_patterns(client):
    response = client.get("/patterns")
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 23
    assert body["patterns"][0]["name"] == "Abstract Factory"
    assert body["patterns"][-1]["name"] == "Visitor"


def test_list_by_category(client):
    response = client.get("/patterns", params={"category": "structural"})
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 7
    assert {p["category"] for p in body["patterns"]} == {"structural"}


def test_unknown_category_is_rejected(client):
    response = client.get("/patterns", params={"category": "architectural"})
    assert response.status_code == 422


def test_categories_overview(client):
    response = client.get("/patterns/categories")
    assert response.status_code == 200
    assert response.json() == [
        {"category": "creational", "label": "Creational", "count": 5},
        {"category": "structural", "label": "Structural", "count": 7},
        {"category": "behavioral", "label": "Behavioral", "count": 11},
    ]


def test_get_pattern(client):
    response = client.get("/patterns/Template Method")
    assert response.status_code == 200
    body = response.json()
    assert body["category"] == "behavioral"
    assert body["aliases"] == []


def test_get_pattern_not_found(client):
    response = client.get("/patterns/singleton")
    assert response.status_code == 404
    assert response.json() == {"detail": "Pattern 'singleton' not found"}


def test_app_uses_the_catalog_it_was_given():
    catalog = PatternCatalog(
        [PatternEntry(name="Singleton", category=Category.CREATIONAL, summary="one instance")]
    )
    client = TestClient(create_app(catalog))
    assert client.get("/patterns").json()["count"] == 1
    assert client.get("/patterns/Observer").status_code == 404


def test_app_loads_catalog_file_from_config(tmp_path, monkeypatch):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "patterns": [
                    {"name": "Strategy", "category": "behavioral", "summary": "swap algorithms"},
                    {"name": "Builder", "category": "creational", "summary": "step by step"},
                ]
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setattr(config, "PATTERN_CATALOG_PATH", str(path))

    client = TestClient(create_app())
    body = client.get("/patterns").json()

    assert body["count"] == 2
    assert [p["name"] for p in body["patterns"]] == ["Builder", "Strategy"]
    assert client.get("/patterns/Singleton").status_code == 404


def test_get_pattern_with_slash_in_name():
    catalog = PatternCatalog(
        [PatternEntry(name="Handle/Body", category=Category.STRUCTURAL, summary="bridge")]
    )
    client = TestClient(create_app(catalog))
    response = client.get("/patterns/Handle/Body")
    assert response.status_code == 200
    assert response.json()["name"] == "Handle/Body"
