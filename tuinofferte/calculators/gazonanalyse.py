"""
Lawn analysis and repair calculator.

A fixed on-site assessment plus the repair actions chosen after it.
Scarifying rents a machine for one day per started 500 m².
"""

import math

from ..schemas import GazonanalyseOnderhoudData, Herstelacties
from .base import BaseCalculator, positive

BEOORDELING_UREN = 0.5

VERTICUTEREN_UREN_PER_M2 = 0.01
VERTICUTEER_MACHINE_PER_DAG = 80.0
VERTICUTEER_M2_PER_DAG = 500

DOORZAAIEN_UREN_PER_M2 = 0.005
DOORZAAIEN_ZAAD_PRIJS_PER_M2 = 3.0

GRASMAT_UREN_PER_M2 = 0.02
GRASZODEN_PRIJS_PER_M2 = 12.0
GRASZODEN_VERLIES = 5

PLAGGEN_UREN_PER_M2 = 0.025
PLAGSEL_M3_PER_M2 = 0.05
PLAGSEL_AFVOER_UREN_PER_M3 = 0.1

KALE_PLEKKEN_AANDEEL = 0.1
BIJZAAIEN_UREN_PER_M2 = 0.01
BIJZAAIEN_ZAAD_PRIJS_PER_M2 = 5.0

BEKALKEN_UREN_PER_M2 = 0.003
BEKALKEN_PRIJS_PER_M2 = 0.50


class GazonanalyseCalculator(BaseCalculator):

    scope = "gazonanalyse"
    data_model = GazonanalyseOnderhoudData

    def calculate(self, data: GazonanalyseOnderhoudData, lookup, bereikbaarheid_factor):
        regels = []
        oppervlakte = positive(data.oppervlakte)
        if oppervlakte is None:
            return regels

        uurtarief = lookup.uurtarief

        def arbeid(omschrijving, uren):
            regels.append(self.arbeid_regel(
                omschrijving, self.labor_hours(uren, bereikbaarheid_factor), uurtarief,
            ))

        regels.append(self.arbeid_regel("Gazonbeoordeling ter plaatse", BEOORDELING_UREN, uurtarief))

        acties = data.herstelacties or Herstelacties()

        if acties.verticuteren:
            arbeid("Verticuteren", oppervlakte * VERTICUTEREN_UREN_PER_M2)
            dagen = max(1, math.ceil(oppervlakte / VERTICUTEER_M2_PER_DAG))
            meervoud = "en" if dagen > 1 else ""
            regels.append(self.machine_regel(
                f"Verticuteer-machine huur ({dagen} dag{meervoud})", dagen, "dag",
                VERTICUTEER_MACHINE_PER_DAG,
            ))

        if acties.doorzaaien:
            arbeid("Doorzaaien", oppervlakte * DOORZAAIEN_UREN_PER_M2)
            regels.append(self.materiaal_regel(
                "Graszaad (doorzaaien)", oppervlakte, "m²", DOORZAAIEN_ZAAD_PRIJS_PER_M2,
            ))

        if acties.nieuwe_grasmat:
            arbeid("Nieuwe grasmat leggen", oppervlakte * GRASMAT_UREN_PER_M2)
            regels.append(self.materiaal_regel(
                "Graszoden", oppervlakte, "m²", GRASZODEN_PRIJS_PER_M2, GRASZODEN_VERLIES,
            ))

        if acties.plaggen:
            arbeid("Plaggen (zode verwijderen)", oppervlakte * PLAGGEN_UREN_PER_M2)
            arbeid("Plagsel afvoeren", oppervlakte * PLAGSEL_M3_PER_M2 * PLAGSEL_AFVOER_UREN_PER_M3)

        if acties.bijzaaien_kale_plekken:
            kale_plekken = positive(acties.kale_plekk_oppervlakte)
            if kale_plekken is None:
                kale_plekken = math.ceil(oppervlakte * KALE_PLEKKEN_AANDEEL)
            arbeid("Bijzaaien kale plekken", kale_plekken * BIJZAAIEN_UREN_PER_M2)
            regels.append(self.materiaal_regel(
                "Graszaad (kale plekken)", kale_plekken, "m²", BIJZAAIEN_ZAAD_PRIJS_PER_M2,
            ))

        if data.bekalken:
            arbeid("Bekalken gazon", oppervlakte * BEKALKEN_UREN_PER_M2)
            regels.append(self.materiaal_regel(
                "Kalk (gazon)", oppervlakte, "m²", BEKALKEN_PRIJS_PER_M2,
            ))

        return regels
