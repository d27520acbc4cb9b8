"""Bundled default reference data, for forms that want to show norm hours and prices."""

from typing import List

from fastapi import APIRouter

from .. import reference_data
from ..schemas import CamelModel, Correctiefactor, Instellingen, Normuur, Product

router = APIRouter(prefix="/referentiedata", tags=["referentiedata"])


class ReferentiedataResponse(CamelModel):
    normuren: List[Normuur]
    correctiefactoren: List[Correctiefactor]
    producten: List[Product]
    instellingen: Instellingen


@router.get("", response_model=ReferentiedataResponse)
def get_referentiedata():
    return ReferentiedataResponse(
        normuren=reference_data.NORMUREN,
        correctiefactoren=reference_data.CORRECTIEFACTOREN,
        producten=reference_data.PRODUCTEN,
        instellingen=reference_data.default_instellingen(),
    )
