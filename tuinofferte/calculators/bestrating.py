"""
Bestrating (paving) calculator.

Laying hours depend on the paving material and are corrected for cutting
complexity. Every paving job gets a sand bed; edging is optional and
estimated from the perimeter of a square of the same area. The foundation
build-up (rubble, sand, stabiliser) follows the use of the surface and can
be given per zone.
"""

import math

from ..schemas import BestratingData
from .base import BaseCalculator, positive

ZAND_M3_PER_M2 = 0.05

ACTIVITEIT_PER_TYPE = {
    "tegel": ("tegels leggen", "Tegels"),
    "klinker": ("klinkers leggen", "Klinkers"),
    "natuursteen": ("natuursteen leggen", "Natuursteen"),
}

# €/m³
FUNDERING_PRIJZEN = {
    "gebroken_puin": 25.0,
    "straatzand": 18.0,
    "brekerszand": 35.0,
    "stabiliser": 45.0,
}

# Layer thickness in cm per use of the paved surface
FUNDERING_PER_TYPE = {
    "pad": {"gebroken_puin": 10, "zand": 5},
    "oprit": {"gebroken_puin": 20, "brekerszand": 5},
    "terrein": {"gebroken_puin": 35, "brekerszand": 5, "stabiliser": 5},
}

FUNDERING_VERLIES = 5


class BestratingCalculator(BaseCalculator):

    scope = "bestrating"
    normuur_scope = "bestrating"
    data_model = BestratingData

    def calculate(self, data: BestratingData, lookup, bereikbaarheid_factor):
        regels = []
        oppervlakte = positive(data.oppervlakte)
        if oppervlakte is None:
            return regels

        snijwerk_factor = lookup.correction_factor("snijwerk", data.snijwerk or "laag")
        bestrating_type = data.type_bestrating or "tegel"
        activiteit, label = ACTIVITEIT_PER_TYPE.get(bestrating_type, ACTIVITEIT_PER_TYPE["tegel"])
        self.norm_arbeid(regels, lookup, activiteit, oppervlakte, f"{label} leggen",
                         bereikbaarheid_factor, snijwerk_factor)

        # --- Zandbed ---
        self.norm_arbeid(regels, lookup, "zandbed", oppervlakte, "Zandbed aanbrengen",
                         bereikbaarheid_factor)
        onderbouw = data.onderbouw
        dikte_cm = positive(onderbouw.dikte_onderlaag) if onderbouw else None
        zand_m3_per_m2 = dikte_cm / 100 if dikte_cm else ZAND_M3_PER_M2
        self.product_materiaal(regels, lookup, "straatzand", "Straatzand",
                               oppervlakte * zand_m3_per_m2, "m³", "Zand en fundering")

        # --- Opsluitbanden ---
        if onderbouw and onderbouw.opsluitbanden:
            omtrek = 4 * math.sqrt(oppervlakte)
            self.norm_arbeid(regels, lookup, "opsluitbanden", omtrek, "Opsluitbanden plaatsen",
                             bereikbaarheid_factor)
            self.product_materiaal(regels, lookup, "opsluitband", "Opsluitband 100x20x6",
                                   omtrek, "stuk", "Bestrating")

        # --- Fundering ---
        if data.bestratingtype:
            regels.extend(self._fundering_regels(data.bestratingtype, oppervlakte))
        for zone in data.zones:
            zone_oppervlakte = positive(zone.oppervlakte)
            if zone_oppervlakte is None:
                continue
            regels.extend(self._fundering_regels(zone.type, zone_oppervlakte,
                                                 prefix=f"Zone {zone.type}: "))

        return regels

    def _fundering_regels(self, bestratingtype: str, oppervlakte: float, prefix: str = "") -> list:
        """Foundation material lines; an unknown surface use has no build-up."""
        opbouw = FUNDERING_PER_TYPE.get(bestratingtype)
        if opbouw is None:
            return []

        regels = []
        if "gebroken_puin" in opbouw:
            cm = opbouw["gebroken_puin"]
            regels.append(self.materiaal_regel(
                f"{prefix}Gebroken puin ({cm} cm)", oppervlakte * cm / 100, "m³",
                FUNDERING_PRIJZEN["gebroken_puin"], FUNDERING_VERLIES,
            ))
        if "zand" in opbouw:
            cm = opbouw["zand"]
            regels.append(self.materiaal_regel(
                f"{prefix}Straatzand ({cm} cm)", oppervlakte * cm / 100, "m³",
                FUNDERING_PRIJZEN["straatzand"], FUNDERING_VERLIES,
            ))
        if "brekerszand" in opbouw:
            cm = opbouw["brekerszand"]
            regels.append(self.materiaal_regel(
                f"{prefix}Brekerszand ({cm} cm)", oppervlakte * cm / 100, "m³",
                FUNDERING_PRIJZEN["brekerszand"], FUNDERING_VERLIES,
            ))
        if "stabiliser" in opbouw:
            regels.append(self.materiaal_regel(
                f"{prefix}Stabiliser (cement)", oppervlakte * opbouw["stabiliser"] / 100, "m³",
                FUNDERING_PRIJZEN["stabiliser"], 0,
            ))
        return regels
