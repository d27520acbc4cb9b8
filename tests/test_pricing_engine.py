"""
Quote totals.

Tests:
1. Default margin and VAT
2. Per-scope margins
3. Per-line margin override beats scope and default
4. Machine lines count as labor cost but not as hours
5. Empty quote
6. Warranty package line
"""

import math

import pytest

from tuinofferte.pricing_engine import (
    aggregate_totals,
    garantiepakket_regel,
    resolve_margin_percentage,
)
from tuinofferte.schemas import OfferteRegel


def _regel(scope, regel_type, hoeveelheid, prijs, **extra):
    return OfferteRegel(
        id=f"{scope}_1",
        scope=scope,
        omschrijving=f"{scope} {regel_type}",
        eenheid="uur" if regel_type == "arbeid" else "stuk",
        hoeveelheid=hoeveelheid,
        prijs_per_eenheid=prijs,
        totaal=round(hoeveelheid * prijs, 2),
        type=regel_type,
        **extra,
    )


def test_default_margin_and_vat():
    regels = [_regel("grondwerk", "arbeid", 10, 45), _regel("grondwerk", "materiaal", 5, 30)]
    totalen = aggregate_totals(regels, 20, 21)
    assert totalen.arbeidskosten == 450.0
    assert totalen.materiaalkosten == 150.0
    assert totalen.totaal_uren == 10.0
    assert totalen.subtotaal == 600.0
    assert totalen.marge == 120.0
    assert totalen.marge_percentage == 20.0
    assert totalen.totaal_ex_btw == 720.0
    assert totalen.btw == pytest.approx(151.2)
    assert totalen.totaal_incl_btw == pytest.approx(871.2)


def test_scope_margins():
    regels = [_regel("grondwerk", "arbeid", 10, 45), _regel("bestrating", "arbeid", 10, 45)]
    totalen = aggregate_totals(regels, 20, 21, {"grondwerk": 15, "bestrating": 25})
    # 450 × 15% + 450 × 25%
    assert totalen.marge == 180.0
    assert totalen.marge_percentage == 20.0


def test_line_margin_override():
    override = _regel("bemesting", "arbeid", 10, 45, marge_percentage=30)
    regels = [override, _regel("grondwerk", "materiaal", 5, 30)]
    totalen = aggregate_totals(regels, 20, 21, {"bemesting": 50})
    # 450 × 30% + 150 × 20%
    assert totalen.marge == 165.0
    assert totalen.marge_percentage == pytest.approx(27.5)
    assert resolve_margin_percentage(override, {"bemesting": 50}, 20) == 30
    assert resolve_margin_percentage(regels[1], {"grondwerk": None}, 20) == 20


def test_machine_lines_are_labor_cost_without_hours():
    regels = [_regel("heggen", "arbeid", 16, 45), _regel("heggen", "machine", 2, 250)]
    totalen = aggregate_totals(regels, 20, 21)
    assert totalen.arbeidskosten == 1220.0
    assert totalen.materiaalkosten == 0.0
    assert totalen.totaal_uren == 16.0


def test_empty_quote():
    totalen = aggregate_totals([], 20, 21)
    assert totalen.arbeidskosten == 0.0
    assert totalen.materiaalkosten == 0.0
    assert totalen.totaal_uren == 0.0
    assert totalen.subtotaal == 0.0
    assert totalen.marge == 0.0
    assert totalen.totaal_ex_btw == 0.0
    assert totalen.btw == 0.0
    assert totalen.totaal_incl_btw == 0.0
    assert totalen.marge_percentage == 20.0
    assert not any(math.isnan(value) for value in totalen.model_dump().values())


def test_garantiepakket_regel():
    regel = garantiepakket_regel("Zorgeloos 5 jaar", 249.95)
    assert regel.id == "garantie_1"
    assert regel.scope == "garantie"
    assert regel.omschrijving == "Garantiepakket: Zorgeloos 5 jaar"
    assert regel.eenheid == "pakket"
    assert regel.type == "materiaal"
    assert regel.totaal == 249.95

    totalen = aggregate_totals([regel], 20, 21)
    assert totalen.materiaalkosten == 249.95
