"""
Fertilising upkeep calculator.

Every line carries a 70% margin override: fertilising is sold at a much
higher margin than the rest of the garden work.
"""

from ..schemas import BemestingOnderhoudData
from .base import BaseCalculator, positive

# €/m² per application
BEMESTING_PRODUCT_PRIJS = {
    "basis": 0.80,
    "premium": 1.50,
    "bio": 2.00,
}
BEMESTING_UREN_PER_M2 = 0.005
# Discount on labor when fertilising two or more times a year
FREQUENTIE_KORTING = 0.90

KALK_PRIJS_PER_M2 = 0.50
KALK_UREN_PER_M2 = 0.003
GRONDANALYSE_PRIJS = 49.0

BEMESTING_MARGE = 70.0


class BemestingCalculator(BaseCalculator):

    scope = "bemesting"
    data_model = BemestingOnderhoudData

    def calculate(self, data: BemestingOnderhoudData, lookup, bereikbaarheid_factor):
        regels = []
        oppervlakte = positive(data.oppervlakte)
        if oppervlakte is None:
            return regels

        uurtarief = lookup.uurtarief
        bemestingstype = data.bemestingstype or "basis"
        frequentie = data.frequentie if data.frequentie and data.frequentie > 0 else 1
        korting = FREQUENTIE_KORTING if frequentie >= 2 else 1.0

        label = f" ({frequentie}x per jaar)" if frequentie > 1 else ""
        regels.append(self.arbeid_regel(
            f"Bemesting aanbrengen ({bemestingstype}){label}",
            self.labor_hours(oppervlakte * BEMESTING_UREN_PER_M2 * frequentie, korting,
                             bereikbaarheid_factor),
            uurtarief,
        ))
        prijs = BEMESTING_PRODUCT_PRIJS.get(bemestingstype, BEMESTING_PRODUCT_PRIJS["basis"])
        regels.append(self.materiaal_regel(
            f"Bemestingsproduct ({bemestingstype})", oppervlakte * frequentie, "m²", prijs,
        ))

        if data.kalkbehandeling:
            regels.append(self.arbeid_regel(
                "Kalkbehandeling",
                self.labor_hours(oppervlakte * KALK_UREN_PER_M2, bereikbaarheid_factor),
                uurtarief,
            ))
            regels.append(self.materiaal_regel("Kalk", oppervlakte, "m²", KALK_PRIJS_PER_M2))

        if data.grondanalyse:
            regels.append(self.materiaal_regel("Grondanalyse", 1, "analyse", GRONDANALYSE_PRIJS))

        return [regel.model_copy(update={"marge_percentage": BEMESTING_MARGE}) for regel in regels]
