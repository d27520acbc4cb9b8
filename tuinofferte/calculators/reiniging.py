"""
Cleaning upkeep calculator.

Terrace cleaning (rate corrected per surface material), leaf clearing
once or per season, weeding paving by method, and algae removal. Weed
burning and hot-water treatment rent a machine for a day; the chemical
method consumes weed killer.
"""

from ..schemas import ReinigingOnderhoudData
from .base import BaseCalculator, positive
from .overig_onderhoud import TERRAS_REINIGEN_UREN_PER_M2

TERRAS_TYPE_FACTOR = {
    "keramisch": 1.2,
    "beton": 1.0,
    "klinkers": 1.1,
    "natuursteen": 1.5,
    "hout": 1.3,
}

REINIGINGSMIDDEL_PRIJS_PER_M2 = 2.0
ANTI_ALG_PRIJS_PER_M2 = 1.5

BLAD_UREN_PER_M2 = 0.02
BLAD_AFVOER_UREN_PER_M2 = 0.005
BEURTEN_PER_SEIZOEN = 4

# method -> (hours/m², machine rental (label, €/day) or None, weed killer €/m²)
ONKRUID_METHODEN = {
    "handmatig": (0.04, None, 0.0),
    "branden": (0.02, ("Onkruidbrander huur", 45.0), 0.0),
    "heet_water": (0.015, ("Heetwater-apparaat huur", 65.0), 0.0),
    "chemisch": (0.01, None, 3.0),
}

ALGE_UREN_PER_M2 = 0.03


class ReinigingCalculator(BaseCalculator):

    scope = "reiniging"
    normuur_scope = "overig_onderhoud"
    data_model = ReinigingOnderhoudData

    def calculate(self, data: ReinigingOnderhoudData, lookup, bereikbaarheid_factor):
        regels = []
        uurtarief = lookup.uurtarief

        # --- Terras ---
        terras = positive(data.terras_oppervlakte)
        if data.terras_reinigen and terras:
            type_factor = TERRAS_TYPE_FACTOR.get(data.terras_type, 1.0)
            normuur = lookup.find_normuur(self.normuur_scope, "terras reinigen")
            per_m2 = normuur.normuur_per_eenheid if normuur else TERRAS_REINIGEN_UREN_PER_M2
            label = f" ({data.terras_type})" if data.terras_type else ""
            uren = self.labor_hours(terras * per_m2, type_factor, bereikbaarheid_factor)
            regels.append(self.arbeid_regel(f"Terras reinigen{label}", uren, uurtarief))
            regels.append(self.materiaal_regel(
                "Reinigingsmiddel", terras, "m²", REINIGINGSMIDDEL_PRIJS_PER_M2,
            ))

        # --- Blad ---
        blad = positive(data.bladruimen_oppervlakte)
        if data.bladruimen and blad:
            seizoen = data.bladruimen_type == "seizoen"
            beurten = BEURTEN_PER_SEIZOEN if seizoen else 1
            label = f" ({BEURTEN_PER_SEIZOEN} beurten)" if seizoen else " (eenmalig)"
            regels.append(self.arbeid_regel(
                f"Bladruimen{label}",
                self.labor_hours(blad * BLAD_UREN_PER_M2 * beurten, bereikbaarheid_factor),
                uurtarief,
            ))
            regels.append(self.arbeid_regel(
                "Blad afvoeren",
                self.labor_hours(blad * BLAD_AFVOER_UREN_PER_M2 * beurten, bereikbaarheid_factor),
                uurtarief,
            ))

        # --- Onkruid ---
        onkruid = positive(data.onkruid_oppervlakte)
        if data.onkruid_bestrating and onkruid:
            methode = data.onkruid_methode or "handmatig"
            if methode in ONKRUID_METHODEN:
                uren_per_m2, machine, middel_prijs = ONKRUID_METHODEN[methode]
                label = methode.replace("_", " ")
                regels.append(self.arbeid_regel(
                    f"Onkruid bestrating ({label})",
                    self.labor_hours(onkruid * uren_per_m2, bereikbaarheid_factor),
                    uurtarief,
                ))
                if machine:
                    omschrijving, dagprijs = machine
                    regels.append(self.machine_regel(omschrijving, 1, "dag", dagprijs))
                if middel_prijs:
                    regels.append(self.materiaal_regel(
                        "Onkruidbestrijdingsmiddel", onkruid, "m²", middel_prijs,
                    ))

        # --- Alg ---
        alge = positive(data.alge_oppervlakte)
        if data.algereiniging and alge:
            regels.append(self.arbeid_regel(
                "Algereiniging", self.labor_hours(alge * ALGE_UREN_PER_M2, bereikbaarheid_factor),
                uurtarief,
            ))
            regels.append(self.materiaal_regel("Anti-alg middel", alge, "m²", ANTI_ALG_PRIJS_PER_M2))

        return regels
