from starlette.testclient import TestClient

from crocalc.api.app import app
from crocalc.calculator.calculate import build_context
from crocalc.config.settings import get_settings


def _patch_context(monkeypatch, catalog):
    import crocalc.api.routes as routes

    context = build_context(settings=get_settings(), catalog=catalog)
    monkeypatch.setattr(routes, "_context", lambda: context)
    return context


def test_api_calculation_with_origin(monkeypatch, berlin, two_institute_catalog):
    _patch_context(monkeypatch, two_institute_catalog)
    payload = {
        "profile": {"team_size": 5, "dentists": 2},
        "origin": {"lat": berlin.lat, "lon": berlin.lon},
        "address": {"street": "Unter den Linden 1", "city": "Berlin", "postal_code": "10117"},
    }

    with TestClient(app) as c:
        resp = c.post("/api/calculations", json=payload)

    assert resp.status_code == 200
    data = resp.json()
    result = data["result"]
    assert result["nearest_institute"]["institute"]["name"] == "A"
    assert result["nearest_institute"]["one_way_distance_km"] == 0
    assert result["total_traditional_costs"] == 3240
    assert result["savings"] == 3240 - 195
    assert data["query"]["profile"]["assistants"] == 3
    assert data["meta"]["status"] == "ok"


def test_api_calculation_without_origin(monkeypatch, two_institute_catalog):
    _patch_context(monkeypatch, two_institute_catalog)

    with TestClient(app) as c:
        resp = c.post("/api/calculations", json={"profile": {"team_size": 5, "dentists": 2}})

    assert resp.status_code == 200
    data = resp.json()
    assert data["result"]["nearest_institute"] is None
    assert data["meta"]["issues"] == ["missing_origin"]


def test_api_rejects_invalid_profile(monkeypatch, two_institute_catalog):
    _patch_context(monkeypatch, two_institute_catalog)

    with TestClient(app) as c:
        resp = c.post("/api/calculations", json={"profile": {"team_size": 5, "dentists": 6}})

    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "INVALID_PROFILE"


def test_api_rejects_out_of_range_origin(monkeypatch, two_institute_catalog):
    _patch_context(monkeypatch, two_institute_catalog)

    with TestClient(app) as c:
        resp = c.post(
            "/api/calculations",
            json={"profile": {"team_size": 5, "dentists": 2}, "origin": {"lat": 91, "lon": 0}},
        )

    assert resp.status_code == 422


def test_api_lists_institutes_and_settings(monkeypatch, two_institute_catalog):
    _patch_context(monkeypatch, two_institute_catalog)

    with TestClient(app) as c:
        institutes = c.get("/api/institutes").json()
        settings = c.get("/api/settings").json()
        health = c.get("/api/health").json()

    assert institutes["count"] == 2
    assert [i["name"] for i in institutes["institutes"]] == ["A", "B"]
    assert settings["traditional"] == {"cost_per_dentist": 1200, "cost_per_assistant": 280}
    assert settings["travel"]["carpool_size"] == 5
    assert health == {"status": "ok"}


def test_cors_options_from_env(monkeypatch):
    import crocalc.api.app as app_module

    monkeypatch.setenv("CROCALC_CORS_ORIGINS", "https://www.crocodile-health.com, http://localhost:8080")
    assert app_module._cors_options() == {
        "allow_origins": ["https://www.crocodile-health.com", "http://localhost:8080"]
    }

    monkeypatch.delenv("CROCALC_CORS_ORIGINS")
    assert app_module._cors_options() == {"allow_origin_regex": app_module.LOCALHOST_ORIGIN_REGEX}

    monkeypatch.setenv("CROCALC_CORS_ALLOW_LOCAL", "0")
    assert app_module._cors_options() is None
