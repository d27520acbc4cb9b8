"""
Abstract base class for all scope calculators.

Input: the raw scopeData bag for one scope + the CalculationContext
Output: list of OfferteRegel (arbeid / materiaal / machine lines)
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import List, Optional, Type

from pydantic import BaseModel

from ..schemas import CalculationContext, OfferteRegel, Product, RegelType
from .reference_lookup import ReferenceLookup

logger = logging.getLogger(__name__)


def round_to_quarter(hours: float) -> float:
    """
    Nearest multiple of 0.25, halves rounded away from zero.
    Hours too large to quantize come back as infinity.
    """
    scaled = abs(hours) * 4
    if not math.isfinite(scaled):
        return math.copysign(math.inf, hours)
    quarters = math.floor(scaled + 0.5)
    return quarters / 4 if hours >= 0 else -quarters / 4


def round_money(amount: float) -> float:
    return round(amount, 2)


def positive(value) -> Optional[float]:
    """The value as a float when it is a finite number > 0, otherwise None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


class BaseCalculator(ABC):
    """All scope calculators inherit from this."""

    # Scope id written on every emitted line
    scope: str = ""
    # Scope key into the norm-hour table
    normuur_scope: str = ""
    # Pydantic model the raw scope data is validated into
    data_model: Type[BaseModel] = BaseModel

    def generate(self, scope_data, context: CalculationContext,
                 bereikbaarheid_factor: float, scope_id: Optional[str] = None) -> List[OfferteRegel]:
        """
        Validates the scope data, runs the scope formulas and numbers the lines
        as "{scope_id}_{n}" (scope_id defaults to the calculator scope).

        Raises pydantic.ValidationError when scope_data has the wrong shape.
        Everything else (missing quantities, unknown reference data, quantities
        so large a line overflows) yields fewer lines, never an exception.
        """
        data = self.data_model.model_validate(scope_data)
        lookup = ReferenceLookup(context)
        regels = self.calculate(data, lookup, bereikbaarheid_factor)
        prefix = scope_id or self.scope

        finite = [r for r in regels if math.isfinite(r.hoeveelheid) and math.isfinite(r.totaal)]
        if len(finite) < len(regels):
            logger.warning("Scope %s: dropped %d regels with a non-finite quantity or total",
                           prefix, len(regels) - len(finite))
        regels = finite

        numbered = [
            regel.model_copy(update={"id": f"{prefix}_{index}"})
            for index, regel in enumerate(regels, start=1)
        ]
        uren = sum(r.hoeveelheid for r in numbered if r.type == RegelType.ARBEID)
        logger.info("Scope %s: %d regels, %.2f uur", prefix, len(numbered), uren)
        return numbered

    @abstractmethod
    def calculate(self, data, lookup: ReferenceLookup,
                  bereikbaarheid_factor: float) -> List[OfferteRegel]:
        """
        Takes the validated scope data.
        Returns the lines for this scope in emission order.
        """
        pass

    # --- Helper methods for all calculators ---

    def labor_hours(self, base_hours: float, *factors: float) -> float:
        """Base hours times every correction factor, unrounded."""
        hours = base_hours
        for factor in factors:
            hours *= factor
        return hours

    def arbeid_regel(self, omschrijving: str, uren: float, uurtarief: float) -> OfferteRegel:
        """Labor line; hours are quantized to the quarter before pricing."""
        hoeveelheid = round_to_quarter(uren)
        return OfferteRegel(
            scope=self.scope,
            omschrijving=omschrijving,
            eenheid="uur",
            hoeveelheid=hoeveelheid,
            prijs_per_eenheid=uurtarief,
            totaal=round_money(hoeveelheid * uurtarief),
            type=RegelType.ARBEID,
        )

    def materiaal_regel(self, omschrijving: str, hoeveelheid: float, eenheid: str,
                        prijs: float, verliespercentage: float = 0.0) -> OfferteRegel:
        """Material line; waste uplift is applied to the quantity before pricing."""
        besteld = round_money(hoeveelheid * (1 + verliespercentage / 100))
        return OfferteRegel(
            scope=self.scope,
            omschrijving=omschrijving,
            eenheid=eenheid,
            hoeveelheid=besteld,
            prijs_per_eenheid=prijs,
            totaal=round_money(besteld * prijs),
            type=RegelType.MATERIAAL,
        )

    def product_regel(self, omschrijving: str, hoeveelheid: float, eenheid: str,
                      product: Product) -> OfferteRegel:
        return self.materiaal_regel(omschrijving, hoeveelheid, eenheid,
                                    product.verkoopprijs, product.verliespercentage)

    def machine_regel(self, omschrijving: str, hoeveelheid: float, eenheid: str,
                      prijs: float) -> OfferteRegel:
        return OfferteRegel(
            scope=self.scope,
            omschrijving=omschrijving,
            eenheid=eenheid,
            hoeveelheid=hoeveelheid,
            prijs_per_eenheid=prijs,
            totaal=round_money(hoeveelheid * prijs),
            type=RegelType.MACHINE,
        )

    def norm_arbeid(self, regels: List[OfferteRegel], lookup: ReferenceLookup,
                    activiteit: str, hoeveelheid: float, omschrijving: str,
                    *factors: float) -> None:
        """
        Appends a labor line of hoeveelheid × norm hours × factors.
        Nothing is appended when the activity has no norm-hour entry.
        """
        normuur = lookup.find_normuur(self.normuur_scope, activiteit)
        if normuur is None:
            return
        uren = self.labor_hours(hoeveelheid * normuur.normuur_per_eenheid, *factors)
        regels.append(self.arbeid_regel(omschrijving, uren, lookup.uurtarief))

    def product_materiaal(self, regels: List[OfferteRegel], lookup: ReferenceLookup,
                          zoekterm: str, omschrijving: str, hoeveelheid: float,
                          eenheid: str, categorie: Optional[str] = None) -> None:
        """Appends a material line priced from the catalog; skipped when the product is missing."""
        product = lookup.find_product(zoekterm, categorie)
        if product is None:
            return
        regels.append(self.product_regel(omschrijving, hoeveelheid, eenheid, product))
