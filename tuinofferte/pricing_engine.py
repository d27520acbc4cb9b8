"""
Quote totals.

Sums the priced lines by kind and adds margin and VAT. Margin is resolved
per line (line override, then scope override, then the default) and summed,
so a quote mixing 15% and 70% lines gets exactly the margin of its parts.

Input: list of OfferteRegel + default margin % + VAT % + optional scope margins
Output: OfferteTotalen
"""

import logging
from typing import List, Optional

from .calculators.base import round_money, round_to_quarter
from .schemas import OfferteRegel, OfferteTotalen, RegelType, ScopeMarges

logger = logging.getLogger(__name__)

GARANTIE_SCOPE = "garantie"


def resolve_margin_percentage(regel: OfferteRegel, scope_marges: Optional[ScopeMarges],
                              standaard_marge_percentage: float) -> float:
    """Line override, then scope override, then the default margin."""
    if regel.marge_percentage is not None:
        return regel.marge_percentage
    if scope_marges:
        scope_marge = scope_marges.get(regel.scope)
        if scope_marge is not None:
            return scope_marge
    return standaard_marge_percentage


def aggregate_totals(regels: List[OfferteRegel], marge_percentage: float,
                     btw_percentage: float,
                     scope_marges: Optional[ScopeMarges] = None) -> OfferteTotalen:
    """
    Totals for a list of quote lines.

    arbeidskosten covers labor and machine lines; totaalUren counts labor
    lines only. An empty list gives all-zero amounts with the default
    margin percentage.
    """
    materiaalkosten = _calculate_subtotal(regels, RegelType.MATERIAAL)
    arbeidskosten = (
        _calculate_subtotal(regels, RegelType.ARBEID)
        + _calculate_subtotal(regels, RegelType.MACHINE)
    )
    totaal_uren = sum(r.hoeveelheid for r in regels if r.type == RegelType.ARBEID)
    marge = _calculate_margin(regels, scope_marges, marge_percentage)

    subtotaal = materiaalkosten + arbeidskosten
    effectief_marge_percentage = (marge / subtotaal) * 100 if subtotaal > 0 else marge_percentage
    totaal_ex_btw = subtotaal + marge
    btw = totaal_ex_btw * (btw_percentage / 100)

    totalen = OfferteTotalen(
        materiaalkosten=round_money(materiaalkosten),
        arbeidskosten=round_money(arbeidskosten),
        totaal_uren=round_to_quarter(totaal_uren),
        subtotaal=round_money(subtotaal),
        marge=round_money(marge),
        marge_percentage=round_money(effectief_marge_percentage),
        totaal_ex_btw=round_money(totaal_ex_btw),
        btw=round_money(btw),
        totaal_incl_btw=round_money(totaal_ex_btw + btw),
    )
    logger.info("Totals for %d regels: subtotaal %.2f, marge %.2f, incl. btw %.2f",
                len(regels), totalen.subtotaal, totalen.marge, totalen.totaal_incl_btw)
    return totalen


def garantiepakket_regel(pakket_naam: str, prijs: float) -> OfferteRegel:
    """Warranty package as a single material line."""
    return OfferteRegel(
        id=f"{GARANTIE_SCOPE}_1",
        scope=GARANTIE_SCOPE,
        omschrijving=f"Garantiepakket: {pakket_naam}",
        eenheid="pakket",
        hoeveelheid=1,
        prijs_per_eenheid=prijs,
        totaal=round_money(prijs),
        type=RegelType.MATERIAAL,
    )


def _calculate_subtotal(regels: List[OfferteRegel], regel_type: RegelType) -> float:
    return sum(r.totaal for r in regels if r.type == regel_type)


def _calculate_margin(regels: List[OfferteRegel], scope_marges: Optional[ScopeMarges],
                      standaard_marge_percentage: float) -> float:
    return sum(
        r.totaal * resolve_margin_percentage(r, scope_marges, standaard_marge_percentage) / 100
        for r in regels
    )
