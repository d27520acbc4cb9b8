"""
Quote line generation.

Turns an OfferteCalculationInput into quote lines by dispatching every
requested scope to its calculator, in the order the scopes were selected.

Input: OfferteCalculationInput + CalculationContext (models or plain dicts)
Output: list of OfferteRegel
"""

import logging
from typing import List

from .calculators import get_calculator, has_calculator
from .calculators.reference_lookup import ReferenceLookup
from .schemas import CalculationContext, OfferteCalculationInput, OfferteRegel

logger = logging.getLogger(__name__)


def generate_quote_lines(calculation_input, context) -> List[OfferteRegel]:
    """
    Generate the quote lines for every requested scope.

    - Accessibility is resolved once; an unknown condition counts as 1.0.
    - Scopes without data are skipped; so are scope ids the project type
      has no calculator for.
    - Lines keep scope order and each calculator's emission order.

    Raises pydantic.ValidationError only for structurally malformed input.
    """
    calculation_input = OfferteCalculationInput.model_validate(calculation_input)
    context = CalculationContext.model_validate(context)

    # The caller's context stays untouched; calculators see the quote's conditions
    context = context.model_copy(update={
        "bereikbaarheid": calculation_input.bereikbaarheid,
        "achterstalligheid": calculation_input.achterstalligheid or context.achterstalligheid,
    })
    bereikbaarheid_factor = ReferenceLookup(context).bereikbaarheid_factor()

    regels = []
    for scope in calculation_input.scopes:
        scope_data = calculation_input.scope_data.get(scope)
        if scope_data is None:
            logger.debug("Scope %s selected without data, skipped", scope)
            continue
        if not has_calculator(calculation_input.type, scope):
            logger.warning("No %s calculator for scope %s, skipped", calculation_input.type, scope)
            continue

        calculator = get_calculator(calculation_input.type, scope)
        regels.extend(calculator.generate(scope_data, context, bereikbaarheid_factor, scope_id=scope))

    logger.info("Generated %d regels for %d scopes", len(regels), len(calculation_input.scopes))
    return regels
