"""
Lookups into the reference collections of a CalculationContext.

Every lookup tolerates empty collections and unknown keys: norm hours and
products come back as None, correction factors fall back to a neutral 1.0.
Calculators go through this class instead of scanning the lists themselves.
"""

import logging
from typing import Optional

from ..schemas import CalculationContext, Normuur, Product

logger = logging.getLogger(__name__)

NEUTRAL_FACTOR = 1.0


class ReferenceLookup:
    """Read-only view over one CalculationContext."""

    def __init__(self, context: CalculationContext):
        self.context = context

    @property
    def uurtarief(self) -> float:
        return self.context.instellingen.uurtarief

    def find_normuur(self, scope: str, activiteit: str) -> Optional[Normuur]:
        """First norm-hour entry of `scope` whose activity label contains `activiteit`."""
        term = activiteit.lower()
        for normuur in self.context.normuren:
            if normuur.scope == scope and term in normuur.activiteit.lower():
                return normuur
        logger.debug("No normuur for scope=%s activiteit=%s", scope, activiteit)
        return None

    def correction_factor(self, factor_type: str, waarde: Optional[str]) -> float:
        """Multiplier for (type, waarde); 1.0 when the pair is unknown."""
        if waarde is None:
            return NEUTRAL_FACTOR
        for correctiefactor in self.context.correctiefactoren:
            if correctiefactor.type == factor_type and correctiefactor.waarde == waarde:
                return correctiefactor.factor
        logger.debug("No correctiefactor for %s=%s, using %.1f", factor_type, waarde, NEUTRAL_FACTOR)
        return NEUTRAL_FACTOR

    def find_product(self, term: str, categorie: Optional[str] = None) -> Optional[Product]:
        """First product whose name contains `term`, optionally within one category."""
        term = term.lower()
        for product in self.context.producten:
            if categorie is not None and product.categorie.lower() != categorie.lower():
                continue
            if term in product.productnaam.lower():
                return product
        logger.debug("No product matching '%s'", term)
        return None

    def bereikbaarheid_factor(self) -> float:
        return self.correction_factor("bereikbaarheid", self.context.bereikbaarheid)

    def achterstalligheid_factor(self) -> float:
        """Backlog multiplier; neutral when the quote has no backlog condition."""
        return self.correction_factor("achterstalligheid", self.context.achterstalligheid)
