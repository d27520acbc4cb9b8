"""
Mole control calculator.

Three fixed packages (visits, trap set, checks) plus optional lawn repair,
preventive mesh and a return visit.
"""

from ..schemas import MollenAanvullend, MollenbestrijdingOnderhoudData
from .base import BaseCalculator, positive

# package -> (placement hours, placement label, trap set label, set price, check hours, check label)
PAKKETTEN = {
    "basis": (
        2.0, "Klemmen plaatsen & ophalen (1 bezoek)",
        "Mollenval klemmen (basis)", 35.0,
        0.5, "Tussentijdse controle (1x)",
    ),
    "premium": (
        3 * 1.5, "Klemmen plaatsen & verplaatsen (3 bezoeken)",
        "Mollenval klemmen + preventie (premium)", 75.0,
        3 * 0.5, "Tussentijdse controles (3x)",
    ),
    "premium_plus": (
        6 * 1.0, "Klemmen plaatsen & beheer (6 bezoeken)",
        "Mollenval klemmen + preventie + monitoring (premium plus)", 120.0,
        6 * 0.5, "Controles (6x, onbeperkt pakket)",
    ),
}

GAZONHERSTEL_UREN_PER_M2 = 0.02
HERSTEL_ZAAD_PRIJS_PER_M2 = 5.0
GAAS_UREN_PER_M2 = 0.05
GAAS_PRIJS_PER_M2 = 4.0
TERUGKEER_UREN = 1.0


class MollenbestrijdingCalculator(BaseCalculator):

    scope = "mollenbestrijding"
    data_model = MollenbestrijdingOnderhoudData

    def calculate(self, data: MollenbestrijdingOnderhoudData, lookup, bereikbaarheid_factor):
        regels = []
        uurtarief = lookup.uurtarief

        def arbeid(omschrijving, uren):
            regels.append(self.arbeid_regel(
                omschrijving, self.labor_hours(uren, bereikbaarheid_factor), uurtarief,
            ))

        pakket = PAKKETTEN.get(data.pakket or "basis")
        if pakket:
            plaatsen_uren, plaatsen_label, set_label, set_prijs, controle_uren, controle_label = pakket
            arbeid(plaatsen_label, plaatsen_uren)
            regels.append(self.materiaal_regel(set_label, 1, "set", set_prijs))
            arbeid(controle_label, controle_uren)

        aanvullend = data.aanvullend or MollenAanvullend()

        herstel_m2 = positive(aanvullend.geschatte_m2)
        if aanvullend.gazonherstel and herstel_m2:
            arbeid("Gazonherstel na mollenschade", herstel_m2 * GAZONHERSTEL_UREN_PER_M2)
            regels.append(self.materiaal_regel(
                "Graszaad (mollenherstel)", herstel_m2, "m²", HERSTEL_ZAAD_PRIJS_PER_M2,
            ))

        gaas_m2 = positive(aanvullend.gaas_oppervlakte)
        if aanvullend.preventief_gaas and gaas_m2:
            arbeid("Preventiefgaas aanbrengen", gaas_m2 * GAAS_UREN_PER_M2)
            regels.append(self.materiaal_regel("Mollenwerend gaas", gaas_m2, "m²", GAAS_PRIJS_PER_M2))

        if aanvullend.terugkeer_check:
            arbeid("Terugkeer-check (1 bezoek)", TERUGKEER_UREN)

        return regels
