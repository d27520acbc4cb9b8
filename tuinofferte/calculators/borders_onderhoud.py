"""Border upkeep calculator: weeding by intensity and optional pruning."""

from ..schemas import BordersOnderhoudData
from .base import BaseCalculator, positive


class BordersOnderhoudCalculator(BaseCalculator):

    scope = "borders"
    normuur_scope = "borders_onderhoud"
    data_model = BordersOnderhoudData

    def calculate(self, data: BordersOnderhoudData, lookup, bereikbaarheid_factor):
        regels = []
        oppervlakte = positive(data.border_oppervlakte)
        if oppervlakte is None:
            return regels

        achterstalligheid = lookup.achterstalligheid_factor()

        if data.onkruid_verwijderen:
            intensiteit = data.onderhoudsintensiteit or "gemiddeld"
            self.norm_arbeid(regels, lookup, f"wieden {intensiteit}", oppervlakte,
                             f"Wieden ({intensiteit})", bereikbaarheid_factor, achterstalligheid)

        snoei = data.snoei_in_borders
        if snoei and snoei != "geen":
            self.norm_arbeid(regels, lookup, f"snoei {snoei}", oppervlakte,
                             f"Snoei borders ({snoei})", bereikbaarheid_factor, achterstalligheid)

        return regels
