"""
Lawn upkeep calculator.

Mowing and edging are slowed down by a maintenance backlog; scarifying is
not. Edge length is estimated as the perimeter of a square lawn.
"""

import math

from ..schemas import GrasOnderhoudData
from .base import BaseCalculator, positive


class GrasOnderhoudCalculator(BaseCalculator):

    scope = "gras"
    normuur_scope = "gras_onderhoud"
    data_model = GrasOnderhoudData

    def calculate(self, data: GrasOnderhoudData, lookup, bereikbaarheid_factor):
        regels = []
        oppervlakte = positive(data.gras_oppervlakte)
        if not data.gras_aanwezig or oppervlakte is None:
            return regels

        achterstalligheid = lookup.achterstalligheid_factor()

        if data.maaien:
            self.norm_arbeid(regels, lookup, "maaien", oppervlakte, "Gras maaien",
                             bereikbaarheid_factor, achterstalligheid)
        if data.kanten_steken:
            self.norm_arbeid(regels, lookup, "kanten", 4 * math.sqrt(oppervlakte), "Kanten steken",
                             bereikbaarheid_factor, achterstalligheid)
        if data.verticuteren:
            self.norm_arbeid(regels, lookup, "verticuteren", oppervlakte, "Verticuteren",
                             bereikbaarheid_factor)

        return regels
