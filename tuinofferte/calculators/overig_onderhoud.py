"""Miscellaneous upkeep: leaves, terrace cleaning, weeds in paving, drains and free hours."""

from ..schemas import OverigeOnderhoudData
from .base import BaseCalculator, positive

BLADRUIMEN_UREN = 2
TERRAS_REINIGEN_UREN_PER_M2 = 0.05
ONKRUID_BESTRATING_UREN_PER_M2 = 0.03
AFWATERING_UREN_PER_PUNT = 0.25


class OverigOnderhoudCalculator(BaseCalculator):

    scope = "overig"
    normuur_scope = "overig_onderhoud"
    data_model = OverigeOnderhoudData

    def calculate(self, data: OverigeOnderhoudData, lookup, bereikbaarheid_factor):
        regels = []
        uurtarief = lookup.uurtarief

        def add(omschrijving, uren):
            regels.append(self.arbeid_regel(
                omschrijving, self.labor_hours(uren, bereikbaarheid_factor), uurtarief,
            ))

        if data.bladruimen:
            add("Bladruimen", BLADRUIMEN_UREN)

        terras = positive(data.terras_oppervlakte)
        if data.terras_reinigen and terras:
            add("Terras reinigen", terras * TERRAS_REINIGEN_UREN_PER_M2)

        bestrating = positive(data.bestrating_oppervlakte)
        if data.onkruid_bestrating and bestrating:
            add("Onkruid bestrating verwijderen", bestrating * ONKRUID_BESTRATING_UREN_PER_M2)

        punten = positive(data.aantal_afwateringspunten)
        if data.afwatering_controleren and punten:
            add("Afwatering controleren", punten * AFWATERING_UREN_PER_PUNT)

        overig_uren = positive(data.overig_uren)
        if overig_uren:
            add(data.overig_notities or "Overige werkzaamheden", overig_uren)

        return regels
