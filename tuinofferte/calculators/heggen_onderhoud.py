"""
Hedge upkeep calculators.

Both work on hedge volume (length × height × width). Hedges taller than
2 m take 30% longer to prune. The extended variant adds species, ground
surface and yearly frequency, and rents an aerial platform for tall hedges.
"""

import math

from ..schemas import HeggenOnderhoudData, HeggenOnderhoudExtendedData
from .base import BaseCalculator, positive

SNOEISEL_VOLUME_FACTOR = 0.3
HOOGTE_DREMPEL_METERS = 2
HOOGTE_TOESLAG_FACTOR = 1.3

HAAGSOORT_FACTOR = {
    "liguster": 1.0,
    "beuk": 1.0,
    "taxus": 1.3,
    "conifeer": 1.4,
    "buxus": 0.8,
}

ONDERGROND_FACTOR = {
    "bestrating": 1.15,
    "border": 1.05,
}

HOOGWERKER_PRIJS_PER_DAG = 185.0
HOOGWERKER_DREMPEL_HOOGTE = 4
HOOGWERKER_METERS_PER_DAG = 10


def heg_volume(data: HeggenOnderhoudData):
    lengte = positive(data.lengte)
    hoogte = positive(data.hoogte)
    breedte = positive(data.breedte)
    if lengte is None or hoogte is None or breedte is None:
        return None
    return positive(lengte * hoogte * breedte)


def hoogte_factor(hoogte) -> float:
    if hoogte is not None and hoogte > HOOGTE_DREMPEL_METERS:
        return HOOGTE_TOESLAG_FACTOR
    return 1.0


class HeggenOnderhoudCalculator(BaseCalculator):

    scope = "heggen"
    normuur_scope = "heggen_onderhoud"
    data_model = HeggenOnderhoudData

    def calculate(self, data: HeggenOnderhoudData, lookup, bereikbaarheid_factor):
        regels = []
        volume = heg_volume(data)
        if volume is None:
            return regels

        self.norm_arbeid(regels, lookup, "heg snoeien", volume, "Heg snoeien",
                         bereikbaarheid_factor, hoogte_factor(data.hoogte),
                         lookup.achterstalligheid_factor())
        if data.afvoer_snoeisel:
            self.norm_arbeid(regels, lookup, "snoeisel afvoeren", volume * SNOEISEL_VOLUME_FACTOR,
                             "Snoeisel afvoeren", bereikbaarheid_factor)
        return regels


class HeggenOnderhoudExtendedCalculator(BaseCalculator):

    scope = "heggen"
    normuur_scope = "heggen_onderhoud"
    data_model = HeggenOnderhoudExtendedData

    def calculate(self, data: HeggenOnderhoudExtendedData, lookup, bereikbaarheid_factor):
        regels = []
        volume = heg_volume(data)
        if volume is None:
            return regels

        frequentie = data.snoeifrequentie or 1
        haagsoort = HAAGSOORT_FACTOR.get(data.haagsoort, 1.0)
        ondergrond = ONDERGROND_FACTOR.get(data.ondergrond, 1.0)

        label = f" ({frequentie}x per jaar)" if frequentie > 1 else ""
        self.norm_arbeid(regels, lookup, "heg snoeien", volume, f"Heg snoeien{label}",
                         bereikbaarheid_factor, hoogte_factor(data.hoogte), haagsoort, ondergrond,
                         lookup.achterstalligheid_factor(), frequentie)
        if data.afvoer_snoeisel:
            self.norm_arbeid(regels, lookup, "snoeisel afvoeren", volume * SNOEISEL_VOLUME_FACTOR,
                             "Snoeisel afvoeren", bereikbaarheid_factor, frequentie)

        # --- Hoogwerker ---
        if data.hoogwerker_nodig or data.hoogte > HOOGWERKER_DREMPEL_HOOGTE:
            dagen = math.ceil(data.lengte / HOOGWERKER_METERS_PER_DAG) * frequentie
            meervoud = "en" if dagen > 1 else ""
            regels.append(self.machine_regel(
                f"Hoogwerker huur ({dagen} dag{meervoud})", dagen, "dag", HOOGWERKER_PRIJS_PER_DAG,
            ))

        return regels
