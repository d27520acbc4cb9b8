"""
Water/elektra calculator: garden lighting.

Trench work (dig, lay cable, restore) only happens when trenches are
needed and is driven by trench length, a fixed 5 m per light point.
Fixture installation and fixture material are driven by the point count.
"""

from ..schemas import WaterElektraData
from .base import BaseCalculator, positive

SLEUF_LENGTE_PER_LICHTPUNT = 5


class WaterElektraCalculator(BaseCalculator):

    scope = "water_elektra"
    normuur_scope = "water_elektra"
    data_model = WaterElektraData

    def calculate(self, data: WaterElektraData, lookup, bereikbaarheid_factor):
        regels = []
        aantal_punten = positive(data.aantal_punten)
        if data.verlichting == "geen" or aantal_punten is None:
            return regels

        if data.sleuven_nodig:
            sleuf_lengte = aantal_punten * SLEUF_LENGTE_PER_LICHTPUNT
            self.norm_arbeid(regels, lookup, "sleuf graven", sleuf_lengte, "Sleuf graven",
                             bereikbaarheid_factor)
            self.norm_arbeid(regels, lookup, "kabel leggen", sleuf_lengte, "Kabel leggen",
                             bereikbaarheid_factor)
            self.norm_arbeid(regels, lookup, "sleuf herstellen", sleuf_lengte, "Sleuf herstellen",
                             bereikbaarheid_factor)
            self.product_materiaal(regels, lookup, "kabel", "Kabel 3x1,5 grond", sleuf_lengte, "m",
                                   "Elektra")

        self.norm_arbeid(regels, lookup, "armatuur", aantal_punten, "Armaturen plaatsen",
                         bereikbaarheid_factor)
        self.product_materiaal(regels, lookup, "grondspot", "Grondspot LED", aantal_punten, "stuk",
                               "Elektra")
        self.product_materiaal(regels, lookup, "lasdoos", "Lasdoos waterdicht", aantal_punten, "stuk",
                               "Elektra")

        return regels
