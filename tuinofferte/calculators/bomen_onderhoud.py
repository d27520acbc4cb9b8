"""
Tree upkeep calculators.

Pruning is counted per tree. The extended variant refines the height
tiers, adds cumulative safety surcharges near streets, buildings and cables,
optional inspection and disposal of prunings estimated from crown diameter.
"""

from ..schemas import BomenOnderhoudData, BomenOnderhoudExtendedData
from .base import BaseCalculator, positive

HOOGTE_TOESLAG_FACTOR = 1.3

# Extended height tiers
HOOG_FACTOR = 1.5
HOOG_DREMPEL_METERS = 4
ZEER_HOOG_FACTOR = 2.5
ZEER_HOOG_DREMPEL_METERS = 10

VEILIGHEIDSTOESLAG = {
    "nabij_straat": 0.20,
    "nabij_gebouw": 0.10,
    "nabij_kabels": 0.15,
}

INSPECTIE_VISUEEL_UREN_PER_BOOM = 0.5
INSPECTIE_GECERTIFICEERD_PRIJS = 200.0

KROONDIAMETER_DEFAULT = 3
AFVOER_UREN_FACTOR = 0.1


class BomenOnderhoudCalculator(BaseCalculator):

    scope = "bomen"
    normuur_scope = "bomen_onderhoud"
    data_model = BomenOnderhoudData

    def calculate(self, data: BomenOnderhoudData, lookup, bereikbaarheid_factor):
        regels = []
        aantal = positive(data.aantal_bomen)
        if aantal is None:
            return regels

        snoei = data.snoei or "licht"
        hoogte = HOOGTE_TOESLAG_FACTOR if data.hoogteklasse == "hoog" else 1.0
        self.norm_arbeid(regels, lookup, f"boom snoeien {snoei}", aantal,
                         f"Bomen snoeien ({snoei})", bereikbaarheid_factor, hoogte,
                         lookup.achterstalligheid_factor())
        return regels


class BomenOnderhoudExtendedCalculator(BaseCalculator):

    scope = "bomen"
    normuur_scope = "bomen_onderhoud"
    data_model = BomenOnderhoudExtendedData

    def calculate(self, data: BomenOnderhoudExtendedData, lookup, bereikbaarheid_factor):
        regels = []
        aantal = positive(data.aantal_bomen)
        if aantal is None:
            return regels

        snoei = data.snoei or "licht"
        self.norm_arbeid(regels, lookup, f"boom snoeien {snoei}", aantal,
                         f"Bomen snoeien ({snoei})", bereikbaarheid_factor,
                         self._hoogte_factor(data), self._veiligheid_factor(data),
                         lookup.achterstalligheid_factor())

        # --- Inspectie ---
        if data.inspectie == "visueel":
            uren = self.labor_hours(INSPECTIE_VISUEEL_UREN_PER_BOOM * aantal, bereikbaarheid_factor)
            regels.append(self.arbeid_regel("Boominspectie (visueel)", uren, lookup.uurtarief))
        elif data.inspectie == "gecertificeerd":
            # External certified inspector, billed per tree and kept out of labor hours
            regels.append(self.machine_regel(
                "Boominspectie (gecertificeerd)", aantal, "boom", INSPECTIE_GECERTIFICEERD_PRIJS,
            ))

        # --- Afvoer ---
        if data.afvoer:
            kroondiameter = positive(data.kroondiameter) or KROONDIAMETER_DEFAULT
            afvoer_uren = kroondiameter * kroondiameter * AFVOER_UREN_FACTOR * aantal
            normuur = lookup.find_normuur(self.normuur_scope, "afvoer")
            if normuur:
                afvoer_uren *= normuur.normuur_per_eenheid
            regels.append(self.arbeid_regel(
                "Snoeihout afvoeren", self.labor_hours(afvoer_uren, bereikbaarheid_factor),
                lookup.uurtarief,
            ))

        return regels

    def _hoogte_factor(self, data: BomenOnderhoudExtendedData) -> float:
        hoogte_meter = data.hoogte_meter
        if data.hoogteklasse == "zeer_hoog" or (hoogte_meter is not None and hoogte_meter > ZEER_HOOG_DREMPEL_METERS):
            return ZEER_HOOG_FACTOR
        if data.hoogteklasse == "hoog" or (hoogte_meter is not None and hoogte_meter > HOOG_DREMPEL_METERS):
            return HOOG_FACTOR
        return 1.0

    def _veiligheid_factor(self, data: BomenOnderhoudExtendedData) -> float:
        factor = 1.0
        for veld, toeslag in VEILIGHEIDSTOESLAG.items():
            if getattr(data, veld):
                factor += toeslag
        return factor
