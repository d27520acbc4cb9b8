"""
HTTP endpoints.

Tests:
1.   Health check
2-3. /api/offerte/regels with bundled and explicit reference data
4.   /api/offerte/totalen with configured defaults
5.   /api/offerte/bereken end to end
6.   /api/referentiedata
7-8. Validation errors (422 for request shape, 400 for scope data)
"""

import pytest


def _sample_input(**overrides):
    data = {
        "type": "aanleg",
        "scopes": ["grondwerk"],
        "scopeData": {"grondwerk": {"oppervlakte": 50, "diepte": "standaard", "afvoerGrond": False}},
        "bereikbaarheid": "goed",
    }
    data.update(overrides)
    return data


def _context_json(context):
    return context.model_dump(mode="json", by_alias=True)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_regels_with_bundled_reference_data(client):
    response = client.post("/api/offerte/regels", json={"input": _sample_input()})
    assert response.status_code == 200
    regels = response.json()["regels"]
    assert len(regels) == 1
    assert regels[0]["id"] == "grondwerk_1"
    assert regels[0]["omschrijving"] == "Ontgraven standaard"
    assert regels[0]["hoeveelheid"] == 12.5
    assert "prijsPerEenheid" in regels[0]


def test_regels_with_explicit_context(client, context_factory):
    context = context_factory(instellingen={"uurtarief": 50.0, "standaardMargePercentage": 20.0, "btwPercentage": 21.0})
    response = client.post("/api/offerte/regels", json={
        "input": _sample_input(bereikbaarheid="slecht"),
        "context": _context_json(context),
    })
    assert response.status_code == 200
    regel = response.json()["regels"][0]
    assert regel["hoeveelheid"] == 18.75
    assert regel["prijsPerEenheid"] == 50.0
    assert regel["totaal"] == 937.5


def test_totalen_uses_configured_defaults(client):
    response = client.post("/api/offerte/totalen", json={"regels": [{
        "id": "grondwerk_1", "scope": "grondwerk", "omschrijving": "Ontgraven standaard",
        "eenheid": "uur", "hoeveelheid": 10, "prijsPerEenheid": 45, "totaal": 450, "type": "arbeid",
    }]})
    assert response.status_code == 200
    totalen = response.json()
    assert totalen["arbeidskosten"] == 450.0
    assert totalen["marge"] == 90.0
    assert totalen["totaalExBtw"] == 540.0
    assert totalen["totaalInclBtw"] == pytest.approx(653.4)


def test_bereken_returns_lines_and_totals(client, context):
    response = client.post("/api/offerte/bereken", json={
        "input": _sample_input(),
        "context": _context_json(context),
        "scopeMarges": {"grondwerk": 10},
    })
    assert response.status_code == 200
    body = response.json()
    assert body["regels"][0]["totaal"] == 562.5
    assert body["totalen"]["marge"] == 56.25
    assert body["totalen"]["totaalUren"] == 12.5


def test_referentiedata(client):
    response = client.get("/api/referentiedata")
    assert response.status_code == 200
    body = response.json()
    assert body["normuren"]
    assert body["producten"]
    assert {"type": "bereikbaarheid", "waarde": "slecht"}.items() <= body["correctiefactoren"][2].items()
    assert body["instellingen"]["btwPercentage"] == 21.0


def test_unknown_project_type_is_rejected(client):
    response = client.post("/api/offerte/regels", json={"input": _sample_input(type="renovatie")})
    assert response.status_code == 422


def test_malformed_scope_data_is_bad_request(client):
    data = _sample_input()
    data["scopeData"]["grondwerk"]["oppervlakte"] = "vijftig"
    response = client.post("/api/offerte/regels", json={"input": data})
    assert response.status_code == 400
