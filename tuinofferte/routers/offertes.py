"""
Quote calculation endpoints.

Thin adapter over the calculation core: requests carry the calculation
input and, optionally, the company's own reference data. Without it the
bundled reference data and configured instellingen are used.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException

from ..offerte_calculator import generate_quote_lines
from ..pricing_engine import aggregate_totals
from ..reference_data import default_context, default_instellingen
from ..schemas import (
    CalculationContext, CamelModel, OfferteCalculationInput, OfferteRegel, OfferteTotalen,
    ScopeMarges,
)

router = APIRouter(prefix="/offerte", tags=["offerte"])


class RegelsRequest(CamelModel):
    input: OfferteCalculationInput
    context: Optional[CalculationContext] = None


class RegelsResponse(CamelModel):
    regels: List[OfferteRegel]


class TotalenRequest(CamelModel):
    regels: List[OfferteRegel] = []
    marge_percentage: Optional[float] = None
    btw_percentage: Optional[float] = None
    scope_marges: Optional[ScopeMarges] = None


class BerekenRequest(CamelModel):
    input: OfferteCalculationInput
    context: Optional[CalculationContext] = None
    scope_marges: Optional[ScopeMarges] = None


class BerekenResponse(CamelModel):
    regels: List[OfferteRegel]
    totalen: OfferteTotalen


def _generate(calculation_input: OfferteCalculationInput,
              context: Optional[CalculationContext]) -> List[OfferteRegel]:
    if context is None:
        context = default_context()
    try:
        return generate_quote_lines(calculation_input, context)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/regels", response_model=RegelsResponse)
def calculate_regels(request: RegelsRequest):
    return RegelsResponse(regels=_generate(request.input, request.context))


@router.post("/totalen", response_model=OfferteTotalen)
def calculate_totalen(request: TotalenRequest):
    instellingen = default_instellingen()
    marge = request.marge_percentage
    if marge is None:
        marge = instellingen.standaard_marge_percentage
    btw = request.btw_percentage
    if btw is None:
        btw = instellingen.btw_percentage
    return aggregate_totals(request.regels, marge, btw, request.scope_marges)


@router.post("/bereken", response_model=BerekenResponse)
def bereken_offerte(request: BerekenRequest):
    context = request.context or default_context()
    regels = _generate(request.input, context)
    instellingen = context.instellingen
    totalen = aggregate_totals(
        regels,
        instellingen.standaard_marge_percentage,
        instellingen.btw_percentage,
        request.scope_marges,
    )
    return BerekenResponse(regels=regels, totalen=totalen)
