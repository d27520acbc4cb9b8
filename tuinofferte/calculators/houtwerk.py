"""
Houtwerk (woodwork) calculator.

`afmeting` is a length in meters for a fence and an area in m² for a deck
or pergola. Every structure also gets foundation points; their count
follows the post spacing of the structure.
"""

import math

from ..schemas import HoutwerkData
from .base import BaseCalculator, positive

SCHUTTINGPLANKEN_PER_METER = 6
PAAL_AFSTAND_METERS = 2
VLONDERPLANKEN_M_PER_M2 = 7
VLONDER_EXTRA_FUNDERING_PUNTEN = 4
PERGOLA_FUNDERING_PUNTEN = 4


def fundering_punten(type_houtwerk: str, afmeting: float) -> int:
    if type_houtwerk == "schutting":
        return math.ceil(afmeting / PAAL_AFSTAND_METERS) + 1
    if type_houtwerk == "vlonder":
        return math.ceil(afmeting / PAAL_AFSTAND_METERS) + VLONDER_EXTRA_FUNDERING_PUNTEN
    if type_houtwerk == "pergola":
        return PERGOLA_FUNDERING_PUNTEN
    return 0


class HoutwerkCalculator(BaseCalculator):

    scope = "houtwerk"
    normuur_scope = "houtwerk"
    data_model = HoutwerkData

    def calculate(self, data: HoutwerkData, lookup, bereikbaarheid_factor):
        regels = []
        afmeting = positive(data.afmeting)
        if afmeting is None:
            return regels

        type_houtwerk = data.type_houtwerk or "schutting"

        if type_houtwerk == "schutting":
            self.norm_arbeid(regels, lookup, "schutting", afmeting, "Schutting plaatsen",
                             bereikbaarheid_factor)
            self.product_materiaal(regels, lookup, "schuttingplank", "Schuttingplank 180x15cm",
                                   afmeting * SCHUTTINGPLANKEN_PER_METER, "stuk", "Houtwerk")
            self.product_materiaal(regels, lookup, "schuttingpaal", "Schuttingpaal 7x7x270cm",
                                   math.ceil(afmeting / PAAL_AFSTAND_METERS) + 1, "stuk",
                                   "Houtwerk")
        elif type_houtwerk == "vlonder":
            self.norm_arbeid(regels, lookup, "vlonder", afmeting, "Vlonder leggen",
                             bereikbaarheid_factor)
            self.product_materiaal(regels, lookup, "vlonderdeel", "Vlonderdeel hardhout 21x145mm",
                                   afmeting * VLONDERPLANKEN_M_PER_M2, "m", "Houtwerk")
        elif type_houtwerk == "pergola":
            self.norm_arbeid(regels, lookup, "pergola", afmeting, "Pergola bouwen",
                             bereikbaarheid_factor)

        # --- Fundering ---
        punten = fundering_punten(type_houtwerk, afmeting)
        if punten > 0:
            fundering = data.fundering or "standaard"
            self.norm_arbeid(regels, lookup, f"fundering {fundering}", punten,
                             f"Fundering plaatsen ({fundering})", bereikbaarheid_factor)
            self.product_materiaal(regels, lookup, "betonpoer", "Betonpoer 30x30x30cm",
                                   punten, "stuk", "Houtwerk")

        return regels
