"""Specials calculator: prefab items (jacuzzi, sauna, ...) at fixed installation hours."""

from ..schemas import SpecialsData
from .base import BaseCalculator

INSTALLATIE_UREN = {
    "jacuzzi": 8,
    "sauna": 6,
    "prefab": 4,
}
INSTALLATIE_UREN_DEFAULT = 4


class SpecialsCalculator(BaseCalculator):

    scope = "specials"
    data_model = SpecialsData

    def calculate(self, data: SpecialsData, lookup, bereikbaarheid_factor):
        regels = []
        for item in data.items:
            uren = INSTALLATIE_UREN.get(item.type, INSTALLATIE_UREN_DEFAULT)
            omschrijving = item.omschrijving or f"{item.type} plaatsen"
            regels.append(self.arbeid_regel(
                omschrijving, self.labor_hours(uren, bereikbaarheid_factor), lookup.uurtarief,
            ))
        return regels
