"""
Shared test fixtures: mock reference data, calculation context, test client.

The mock tables deliberately differ from the bundled reference data so the
calculator tests do not move when the seed file is edited.
"""

import pytest
from fastapi.testclient import TestClient

from tuinofferte.main import app
from tuinofferte.schemas import CalculationContext


def _normuur(index, activiteit, scope, per_eenheid, eenheid):
    return {
        "_id": f"n{index}",
        "activiteit": activiteit,
        "scope": scope,
        "normuurPerEenheid": per_eenheid,
        "eenheid": eenheid,
    }


MOCK_NORMUREN = [
    _normuur(i, *row) for i, row in enumerate([
        # grondwerk
        ("Ontgraven licht", "grondwerk", 0.15, "m²"),
        ("Ontgraven standaard", "grondwerk", 0.25, "m²"),
        ("Ontgraven zwaar", "grondwerk", 0.35, "m²"),
        ("Afvoeren grond", "grondwerk", 0.1, "m³"),
        # bestrating
        ("Tegels leggen", "bestrating", 0.4, "m²"),
        ("Klinkers leggen", "bestrating", 0.5, "m²"),
        ("Natuursteen leggen", "bestrating", 0.6, "m²"),
        ("Zandbed aanbrengen", "bestrating", 0.1, "m²"),
        ("Opsluitbanden plaatsen", "bestrating", 0.2, "m"),
        # borders
        ("Grondbewerking", "borders", 0.2, "m²"),
        ("Planten laag", "borders", 0.15, "m²"),
        ("Planten gemiddeld", "borders", 0.25, "m²"),
        ("Planten hoog", "borders", 0.35, "m²"),
        ("Schors aanbrengen", "borders", 0.08, "m²"),
        # gras
        ("Ondergrond bewerken", "gras", 0.1, "m²"),
        ("Graszoden leggen", "gras", 0.12, "m²"),
        ("Gras zaaien", "gras", 0.05, "m²"),
        # houtwerk
        ("Schutting plaatsen", "houtwerk", 0.8, "m"),
        ("Vlonder leggen", "houtwerk", 0.6, "m²"),
        ("Pergola bouwen", "houtwerk", 2.0, "m²"),
        ("Fundering standaard", "houtwerk", 0.5, "stuk"),
        ("Fundering zwaar", "houtwerk", 0.8, "stuk"),
        # water_elektra
        ("Sleuf graven", "water_elektra", 0.3, "m"),
        ("Kabel leggen", "water_elektra", 0.1, "m"),
        ("Sleuf herstellen", "water_elektra", 0.15, "m"),
        ("Armatuur plaatsen", "water_elektra", 0.5, "stuk"),
        # onderhoud
        ("Maaien", "gras_onderhoud", 0.02, "m²"),
        ("Kanten steken", "gras_onderhoud", 0.05, "m"),
        ("Verticuteren", "gras_onderhoud", 0.03, "m²"),
        ("Wieden weinig", "borders_onderhoud", 0.1, "m²"),
        ("Wieden gemiddeld", "borders_onderhoud", 0.15, "m²"),
        ("Wieden veel", "borders_onderhoud", 0.2, "m²"),
        ("Snoei licht", "borders_onderhoud", 0.08, "m²"),
        ("Snoei zwaar", "borders_onderhoud", 0.15, "m²"),
        ("Heg snoeien", "heggen_onderhoud", 0.15, "m³"),
        ("Snoeisel afvoeren", "heggen_onderhoud", 0.1, "m³"),
        ("Boom snoeien licht", "bomen_onderhoud", 0.5, "stuk"),
        ("Boom snoeien zwaar", "bomen_onderhoud", 1.5, "stuk"),
    ], start=1)
]

MOCK_CORRECTIEFACTOREN = [
    {"_id": f"c{i}", "type": factor_type, "waarde": waarde, "factor": factor}
    for i, (factor_type, waarde, factor) in enumerate([
        ("bereikbaarheid", "goed", 1.0),
        ("bereikbaarheid", "beperkt", 1.2),
        ("bereikbaarheid", "slecht", 1.5),
        ("snijwerk", "laag", 1.0),
        ("snijwerk", "gemiddeld", 1.1),
        ("snijwerk", "hoog", 1.3),
        ("achterstalligheid", "laag", 1.0),
        ("achterstalligheid", "gemiddeld", 1.3),
        ("achterstalligheid", "hoog", 1.6),
    ], start=1)
]

MOCK_PRODUCTEN = [
    {
        "_id": f"p{i}",
        "productnaam": naam,
        "categorie": categorie,
        "inkoopprijs": round(verkoop / 2, 2),
        "verkoopprijs": verkoop,
        "eenheid": eenheid,
        "verliespercentage": verlies,
    }
    for i, (naam, categorie, verkoop, eenheid, verlies) in enumerate([
        ("Afvoer grond", "Afvoer", 30.0, "m³", 0),
        ("Straatzand", "Zand en fundering", 35.0, "m³", 5),
        ("Opsluitband 100x20x6", "Bestrating", 5.0, "stuk", 3),
        ("Bodembedekker pot 9cm", "Planten", 3.0, "stuk", 5),
        ("Boomschors 10-40mm", "Grond", 60.0, "m³", 5),
        ("Graszoden", "Gras", 7.0, "m²", 5),
        ("Graszaad sport", "Gras", 15.0, "kg", 0),
        ("Schuttingplank 180x15", "Houtwerk", 8.0, "stuk", 5),
        ("Schuttingpaal 7x7x270", "Houtwerk", 25.0, "stuk", 0),
        ("Vlonderdeel hardhout", "Houtwerk", 20.0, "m", 5),
        ("Betonpoer 30x30x30", "Houtwerk", 15.0, "stuk", 0),
        ("Kabel 3x1,5 grond", "Elektra", 4.0, "m", 5),
        ("Grondspot LED", "Elektra", 45.0, "stuk", 0),
        ("Lasdoos waterdicht", "Elektra", 6.0, "stuk", 0),
    ], start=1)
]

MOCK_INSTELLINGEN = {"uurtarief": 45.0, "standaardMargePercentage": 20.0, "btwPercentage": 21.0}


def make_context(**overrides) -> CalculationContext:
    data = {
        "normuren": MOCK_NORMUREN,
        "correctiefactoren": MOCK_CORRECTIEFACTOREN,
        "producten": MOCK_PRODUCTEN,
        "instellingen": MOCK_INSTELLINGEN,
        "bereikbaarheid": "goed",
    }
    data.update(overrides)
    return CalculationContext.model_validate(data)


@pytest.fixture
def context():
    return make_context()


@pytest.fixture
def empty_context():
    """Context without any reference collections, only instellingen."""
    return make_context(normuren=[], correctiefactoren=[], producten=[])


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def context_factory():
    """make_context as a fixture, for tests that vary one collection or condition."""
    return make_context
