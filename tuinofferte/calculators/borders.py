"""
Borders (planting) calculator.

Soil preparation and planting are area-driven, the planting norm chosen by
intensity. Plant count follows a plants-per-m² table. A bark or gravel
finish adds a spreading line and the finish material.
"""

from ..schemas import BordersData
from .base import BaseCalculator, positive

PLANTEN_PER_M2 = {
    "weinig": 3,
    "gemiddeld": 6,
    "veel": 10,
}

# Form intensity -> norm-hour tier
NORM_NIVEAU = {
    "weinig": "laag",
    "gemiddeld": "gemiddeld",
    "veel": "hoog",
}

AFWERKING_M3_PER_M2 = 0.05

# finish -> (catalog search terms, line label)
AFWERKING_PRODUCTEN = {
    "schors": (("boomschors",), "Boomschors 10-40mm"),
    "grind": (("split", "grind"), "Siersplit / grind"),
}

BODEMVERBETERING_DIEPTE = 0.3     # m
BODEMVERBETERING_PRIJS_PER_M3 = 35.0


class BordersCalculator(BaseCalculator):

    scope = "borders"
    normuur_scope = "borders"
    data_model = BordersData

    def calculate(self, data: BordersData, lookup, bereikbaarheid_factor):
        regels = []
        oppervlakte = positive(data.oppervlakte)
        if oppervlakte is None:
            return regels

        self.norm_arbeid(regels, lookup, "grondbewerking", oppervlakte,
                         "Grondbewerking border", bereikbaarheid_factor)

        intensiteit = data.beplantingsintensiteit or "gemiddeld"
        niveau = NORM_NIVEAU.get(intensiteit, "gemiddeld")
        self.norm_arbeid(regels, lookup, f"planten {niveau}", oppervlakte,
                         f"Beplanten ({intensiteit} intensiteit)", bereikbaarheid_factor)

        planten_per_m2 = PLANTEN_PER_M2.get(intensiteit)
        if planten_per_m2:
            self.product_materiaal(regels, lookup, "bodembedekker", "Bodembedekker (pot 9cm)",
                                   oppervlakte * planten_per_m2, "stuk", "Planten")

        # --- Afwerking ---
        if data.afwerking in AFWERKING_PRODUCTEN:
            zoektermen, label = AFWERKING_PRODUCTEN[data.afwerking]
            self.norm_arbeid(regels, lookup, "schors", oppervlakte,
                             f"{data.afwerking.capitalize()} aanbrengen", bereikbaarheid_factor)
            product = next(
                (p for p in (lookup.find_product(term, "Grond") for term in zoektermen) if p), None
            )
            if product:
                regels.append(self.product_regel(
                    label, oppervlakte * AFWERKING_M3_PER_M2, "m³", product,
                ))

        if data.bodemverbetering and data.bodem_mix:
            regels.append(self.materiaal_regel(
                "Bodemverbetering (nieuwe grondmix)", oppervlakte * BODEMVERBETERING_DIEPTE, "m³",
                BODEMVERBETERING_PRIJS_PER_M3, 0,
            ))

        return regels
