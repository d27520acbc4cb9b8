"""
Grondwerk (earthworks) calculator.

Excavation is area-driven with the norm picked by depth tier. Hauling the
soil away adds a labor line and a disposal line, both on the excavated
volume (area × depth in meters).
"""

from ..schemas import GrondwerkData
from .base import BaseCalculator, positive

DIEPTE_METERS = {
    "licht": 0.2,
    "standaard": 0.4,
    "zwaar": 0.6,
}


class GrondwerkCalculator(BaseCalculator):

    scope = "grondwerk"
    normuur_scope = "grondwerk"
    data_model = GrondwerkData

    def calculate(self, data: GrondwerkData, lookup, bereikbaarheid_factor):
        regels = []
        oppervlakte = positive(data.oppervlakte)
        if oppervlakte is None:
            return regels

        diepte = data.diepte or "standaard"
        self.norm_arbeid(regels, lookup, f"ontgraven {diepte}", oppervlakte,
                         f"Ontgraven {diepte}", bereikbaarheid_factor)

        if data.afvoer_grond:
            # Unknown depth tier gives no volume to haul
            afvoer_m3 = positive(oppervlakte * DIEPTE_METERS.get(diepte, 0.0))
            if afvoer_m3 is not None:
                self.norm_arbeid(regels, lookup, "afvoeren", afvoer_m3,
                                 "Grond afvoeren", bereikbaarheid_factor)
                product = lookup.find_product("afvoer grond", "Afvoer")
                if product:
                    regels.append(self.materiaal_regel(
                        "Afvoer grond (stort)", afvoer_m3, "m³", product.verkoopprijs, 0,
                    ))

        return regels
