"""
Gras (new lawn) calculator.

Ground preparation plus either sod laying (material in m²) or seeding
(material in kg). Artificial turf, drainage and edging are optional extras
priced at fixed rates.
"""

from ..schemas import GrasData
from .base import BaseCalculator, positive

GRASZAAD_KG_PER_M2 = 0.035

KUNSTGRAS_PRIJS_PER_M2 = 45.0
DRAINAGE_PVC_PRIJS_PER_M = 12.0
DRAINAGE_KOKOS_PRIJS_PER_M = 8.0
OPSLUITBAND_PRIJS_PER_M = 15.0
EXTRA_VERLIES = 5


class GrasCalculator(BaseCalculator):

    scope = "gras"
    normuur_scope = "gras"
    data_model = GrasData

    def calculate(self, data: GrasData, lookup, bereikbaarheid_factor):
        regels = []
        oppervlakte = positive(data.oppervlakte)
        if oppervlakte is None:
            return regels

        self.norm_arbeid(regels, lookup, "ondergrond", oppervlakte, "Ondergrond bewerken",
                         bereikbaarheid_factor)

        if data.type == "graszoden":
            self.norm_arbeid(regels, lookup, "graszoden", oppervlakte, "Graszoden leggen",
                             bereikbaarheid_factor)
            self.product_materiaal(regels, lookup, "graszoden", "Graszoden", oppervlakte, "m²",
                                   "Gras")
        else:
            self.norm_arbeid(regels, lookup, "zaaien", oppervlakte, "Gras zaaien",
                             bereikbaarheid_factor)
            self.product_materiaal(regels, lookup, "graszaad", "Graszaad",
                                   oppervlakte * GRASZAAD_KG_PER_M2, "kg", "Gras")

        if data.kunstgras:
            regels.append(self.materiaal_regel(
                "Kunstgras", oppervlakte, "m²", KUNSTGRAS_PRIJS_PER_M2, EXTRA_VERLIES,
            ))
            self.norm_arbeid(regels, lookup, "kunstgras", oppervlakte, "Kunstgras leggen",
                             bereikbaarheid_factor)

        drainage_meters = positive(data.drainage_meters)
        if data.drainage and drainage_meters:
            regels.append(self.materiaal_regel(
                "PVC drainagebuis", drainage_meters, "m", DRAINAGE_PVC_PRIJS_PER_M, EXTRA_VERLIES,
            ))
            regels.append(self.materiaal_regel(
                "Kokos omhulsel", drainage_meters, "m", DRAINAGE_KOKOS_PRIJS_PER_M, EXTRA_VERLIES,
            ))

        opsluitbanden_meters = positive(data.opsluitbanden_meters)
        if data.opsluitbanden and opsluitbanden_meters:
            regels.append(self.materiaal_regel(
                "Opsluitbanden", opsluitbanden_meters, "m", OPSLUITBAND_PRIJS_PER_M, EXTRA_VERLIES,
            ))

        return regels
